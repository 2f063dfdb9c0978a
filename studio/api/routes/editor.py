"""
Éditeur de blocs d'une œuvre — UI admin + API JSON sur un brouillon (WorkDraft).

Le brouillon vit en mémoire (app.state.drafts, clé (membre, œuvre)) jusqu'à save/discard ;
le store n'est modifié qu'au save.

GET    /admin/works/{m}/{w}                          → UI éditeur (liste, glisser-déposer)
GET    /api/admin/works/{m}/{w}/draft                → état du brouillon
PUT    /api/admin/works/{m}/{w}/fields               → titre, description, outils, couverture
POST   /api/admin/works/{m}/{w}/blocks               → ajoute un bloc {type}
PUT    /api/admin/works/{m}/{w}/blocks/{id}          → remplace un bloc
DELETE /api/admin/works/{m}/{w}/blocks/{id}          → supprime un bloc
POST   /api/admin/works/{m}/{w}/blocks/{id}/toggle   → déplie / replie
POST   /api/admin/works/{m}/{w}/blocks/{id}/move     → {direction: up|down}
POST   /api/admin/works/{m}/{w}/blocks/{id}/images   → galerie : ajoute une image
DELETE /api/admin/works/{m}/{w}/blocks/{id}/images/{i} → galerie : retire une image
POST   /api/admin/works/{m}/{w}/drag/start|over|leave|drop|end
POST   /api/admin/works/{m}/{w}/save | discard
"""
import json
import logging
from html import escape as _e
from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from pydantic import ValidationError

from page_builder.blocks import BLOCK_CATALOG, BLOCK_REGISTRY, CamelModel, GalleryBlock, UnknownBlock
from page_builder.core.reorder import DropSide, drop_side
from page_builder.editor import WorkDraft, add_image, remove_image

from ...storage import ContentStore
from ..deps import check_admin, get_drafts, get_store
from .admin import admin_page

log = logging.getLogger(__name__)
router = APIRouter(tags=["Editor"])

_API = "/api/admin/works/{member_id}/{work_id}"


# ── Schémas ────────────────────────────────────────────────────────────────────

class FieldsRequest(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    tools: Optional[List[str]] = None
    image: Optional[str] = None


class AddBlockRequest(CamelModel):
    type: str


class MoveRequest(CamelModel):
    direction: Literal["up", "down"]


class DragStartRequest(CamelModel):
    index: int


class DragOverRequest(CamelModel):
    target: int
    side: Optional[DropSide] = None
    # côté calculé serveur si fourni : position du pointeur + boîte de la cible
    pointer_y: Optional[float] = None
    top: Optional[float] = None
    height: Optional[float] = None


# ── Helpers ────────────────────────────────────────────────────────────────────

def _draft(request: Request, store: ContentStore, member_id: str, work_id: str) -> WorkDraft:
    drafts = get_drafts(request)
    key = (member_id, work_id)
    if key not in drafts:
        work = store.get_work(member_id, work_id)
        if work is None:
            raise HTTPException(404, "Œuvre introuvable")
        drafts[key] = WorkDraft(work)
    return drafts[key]


def _view(draft: WorkDraft) -> dict:
    state = draft.editor.drag.state
    indicator = state.indicator
    return {
        "work":       draft.to_work().to_json_dict(),
        "items":      draft.editor.items(),
        "expandedId": draft.editor.expanded_id,
        "drag": {
            "phase":     state.phase.value,
            "source":    state.source,
            "target":    state.target,
            "side":      state.side,
            "indicator": {"target": indicator[0], "side": indicator[1]} if indicator else None,
        },
        "hasChanges": draft.has_changes,
    }


def _block_or_404(draft: WorkDraft, block_id: str):
    block = draft.editor.get(block_id)
    if block is None:
        raise HTTPException(404, "Bloc introuvable")
    return block


# ── UI HTML ────────────────────────────────────────────────────────────────────

@router.get("/admin/works/{member_id}/{work_id}", response_class=HTMLResponse)
def editor_page(member_id: str, work_id: str, request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    member = store.get_member(member_id)
    if member is None:
        raise HTTPException(404, "Membre introuvable")
    draft = _draft(request, store, member_id, work_id)
    # page (re)chargée : aucun geste en cours côté navigateur
    draft.editor.drag.end()

    options = "".join(
        f'<option value="{_e(t)}">{_e(meta["label"])} — {_e(meta["description"])}</option>'
        for t, meta in BLOCK_CATALOG.items()
    )
    initial = json.dumps(_view(draft)).replace("</", "<\\/")
    api_base = _API.format(member_id=member_id, work_id=work_id)

    body = f"""
<p class="muted"><a href="/admin">← Dashboard</a> · {_e(member.name)}</p>
<div class="card">
  <h2>Project details</h2>
  <label class="muted">Title</label><input type="text" id="f-title">
  <label class="muted">Description</label><textarea id="f-description" rows="3"></textarea>
  <label class="muted">Tools (comma separated)</label><input type="text" id="f-tools">
  <label class="muted">Cover image URL</label><input type="text" id="f-image">
  <p style="margin-top:10px"><button class="btn" onclick="saveFields()">Apply details</button></p>
</div>
<div class="card">
  <h2>Content blocks <span class="muted" id="changes"></span></h2>
  <p class="muted">Drag rows to reorder. Without blocks the page uses the automatic layout.</p>
  <div id="blocks" style="margin:12px 0"></div>
  <p><select id="new-type" style="width:auto">{options}</select>
     <button class="btn" onclick="addBlock()">+ Add block</button></p>
</div>
<p>
  <button class="btn btn--primary" onclick="save()">Save</button>
  <button class="btn" onclick="discard()">Discard changes</button>
  <a class="btn" href="/work/{_e(member_id)}/{_e(work_id)}" target="_blank">View published ↗</a>
</p>
<script type="application/json" id="initial">{initial}</script>"""

    script = f"""
var BASE={json.dumps(api_base)};
var view=JSON.parse(document.getElementById('initial').textContent);
var queue=Promise.resolve(), lastOver=null;
function call(method, path, body){{
  // une requête en échec (toast déjà affiché) ne bloque pas les suivantes
  var p=queue.then(function(){{return api(method, BASE+path, body);}}).then(function(v){{if(v&&v.items)view=v;return view;}});
  queue=p.catch(function(){{return view;}});
  return p;}}
function esc(s){{var d=document.createElement('div');d.textContent=s==null?'':String(s);return d.innerHTML;}}
function blockJson(id){{var bs=view.work.contentBlocks||[];for(var i=0;i<bs.length;i++)if(bs[i].id===id)return bs[i];return {{}};}}
function render(){{
  var w=view.work;
  document.getElementById('f-title').value=w.title||'';
  document.getElementById('f-description').value=w.description||'';
  document.getElementById('f-tools').value=(w.tools||[]).join(', ');
  document.getElementById('f-image').value=w.image||'';
  document.getElementById('changes').textContent=view.hasChanges?'· unsaved changes':'';
  var ind=view.drag.indicator, html='';
  view.items.forEach(function(it,i){{
    var above=ind&&ind.target===i&&ind.side==='above', below=ind&&ind.target===i&&ind.side==='below';
    html+='<div class="row" draggable="true" data-index="'+i+'" style="border:1px solid #e5e7eb;border-radius:10px;padding:10px;margin:6px 0;background:#fff;'
      +(above?'border-top:3px solid #6366f1;':'')+(below?'border-bottom:3px solid #6366f1;':'')
      +(view.drag.source===i&&view.drag.phase!=='idle'?'opacity:.4;':'')+'">'
      +'<span style="cursor:grab">⋮⋮</span> <b>'+esc(it.label)+'</b> <span class="muted">'+esc(it.summary)+'</span>'
      +'<span style="float:right"><button class="btn" onclick="move(\\''+it.id+'\\',\\'up\\')">↑</button> '
      +'<button class="btn" onclick="move(\\''+it.id+'\\',\\'down\\')">↓</button> '
      +'<button class="btn" onclick="toggle(\\''+it.id+'\\')">'+(it.expanded?'Close':'Edit')+'</button> '
      +'<button class="btn btn--danger" onclick="removeBlock(\\''+it.id+'\\')">✕</button></span>';
    if(it.expanded){{
      html+='<textarea id="json-'+it.id+'" rows="12" style="margin-top:10px">'+esc(JSON.stringify(blockJson(it.id),null,2))+'</textarea>'
        +'<p style="margin-top:6px"><button class="btn" onclick="applyBlock(\\''+it.id+'\\')">Apply block</button>'
        +(it.type==='gallery'?' <button class="btn" onclick="addImage(\\''+it.id+'\\')">+ Image</button>':'')+'</p>';
    }}
    html+='</div>';
  }});
  document.getElementById('blocks').innerHTML=html||'<p class="muted">No blocks yet.</p>';
  bindDrag();
}}
function bindDrag(){{
  document.querySelectorAll('#blocks .row').forEach(function(row){{
    var i=parseInt(row.getAttribute('data-index'),10);
    row.addEventListener('dragstart',function(e){{e.dataTransfer.effectAllowed='move';lastOver=null;call('POST','/drag/start',{{index:i}});}});
    row.addEventListener('dragover',function(e){{
      e.preventDefault();var r=row.getBoundingClientRect();
      var side=e.clientY<r.top+r.height/2?'above':'below';
      if(lastOver===i+side)return;lastOver=i+side;
      call('POST','/drag/over',{{target:i,side:side}}).then(render);}});
    row.addEventListener('drop',function(e){{e.preventDefault();call('POST','/drag/drop').then(render);}});
    row.addEventListener('dragend',function(){{lastOver=null;call('POST','/drag/end').then(render);}});
  }});
}}
function saveFields(){{call('PUT','/fields',{{title:val('f-title'),description:val('f-description'),
  tools:val('f-tools').split(',').map(function(s){{return s.trim();}}).filter(Boolean),image:val('f-image')}}).then(render);}}
function val(id){{return document.getElementById(id).value;}}
function addBlock(){{call('POST','/blocks',{{type:val('new-type')}}).then(render);}}
function move(id,dir){{call('POST','/blocks/'+id+'/move',{{direction:dir}}).then(render);}}
function toggle(id){{call('POST','/blocks/'+id+'/toggle').then(render);}}
function removeBlock(id){{if(confirm('Delete this block?'))call('DELETE','/blocks/'+id).then(render);}}
function addImage(id){{call('POST','/blocks/'+id+'/images').then(render);}}
function applyBlock(id){{var data;try{{data=JSON.parse(val('json-'+id));}}catch(e){{toast('Invalid JSON',false);return;}}
  call('PUT','/blocks/'+id,data).then(render);}}
function save(){{call('POST','/save').then(function(){{toast('Saved');render();}});}}
function discard(){{call('POST','/discard').then(function(){{toast('Changes discarded');render();}});}}
render();
"""
    return HTMLResponse(admin_page(f"Edit — {draft.committed.title}", body, script))


# ── API brouillon ──────────────────────────────────────────────────────────────

@router.get(_API + "/draft")
def get_draft(member_id: str, work_id: str, request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    return _view(_draft(request, store, member_id, work_id))


@router.put(_API + "/fields")
def update_fields(member_id: str, work_id: str, req: FieldsRequest, request: Request,
                  store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    draft.update_fields(**req.model_dump(exclude_none=True))
    return _view(draft)


@router.post(_API + "/blocks")
def add_block(member_id: str, work_id: str, req: AddBlockRequest, request: Request,
              store: ContentStore = Depends(get_store)):
    check_admin(request)
    if req.type not in BLOCK_REGISTRY:
        raise HTTPException(400, f"Type de bloc inconnu : {req.type}")
    draft = _draft(request, store, member_id, work_id)
    block = draft.editor.add(req.type)
    return {**_view(draft), "block": block.model_dump(by_alias=True, exclude_none=True)}


@router.put(_API + "/blocks/{block_id}")
def update_block(member_id: str, work_id: str, block_id: str, request: Request,
                 data: Dict[str, Any] = Body(...), store: ContentStore = Depends(get_store)):
    """Remplace le bloc ; `id` et `type` restent ceux du bloc existant."""
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    existing = _block_or_404(draft, block_id)
    if isinstance(existing, UnknownBlock):
        raise HTTPException(400, f"Type de bloc non éditable : {existing.type}")
    try:
        updated = type(existing).model_validate({**data, "id": existing.id, "type": existing.type})
    except ValidationError as e:
        raise HTTPException(400, f"Bloc invalide : {e.error_count()} erreur(s)")
    draft.editor.update(block_id, updated)
    return _view(draft)


@router.delete(_API + "/blocks/{block_id}")
def delete_block(member_id: str, work_id: str, block_id: str, request: Request,
                 store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    _block_or_404(draft, block_id)
    draft.editor.remove(block_id)
    return _view(draft)


@router.post(_API + "/blocks/{block_id}/toggle")
def toggle_block(member_id: str, work_id: str, block_id: str, request: Request,
                 store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    _block_or_404(draft, block_id)
    draft.editor.toggle(block_id)
    return _view(draft)


@router.post(_API + "/blocks/{block_id}/move")
def move_block(member_id: str, work_id: str, block_id: str, req: MoveRequest, request: Request,
               store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    _block_or_404(draft, block_id)
    draft.editor.move(block_id, req.direction)
    return _view(draft)


@router.post(_API + "/blocks/{block_id}/images")
def add_gallery_image(member_id: str, work_id: str, block_id: str, request: Request,
                      store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    block = _block_or_404(draft, block_id)
    if not isinstance(block, GalleryBlock):
        raise HTTPException(400, "Seule une galerie accepte des images supplémentaires")
    draft.editor.update(block_id, add_image(block))
    return _view(draft)


@router.delete(_API + "/blocks/{block_id}/images/{index}")
def remove_gallery_image(member_id: str, work_id: str, block_id: str, index: int, request: Request,
                         store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    block = _block_or_404(draft, block_id)
    if not isinstance(block, GalleryBlock):
        raise HTTPException(400, "Seule une galerie permet de retirer des images")
    draft.editor.update(block_id, remove_image(block, index))
    return _view(draft)


# ── Glisser-déposer ────────────────────────────────────────────────────────────

@router.post(_API + "/drag/start")
def drag_start(member_id: str, work_id: str, req: DragStartRequest, request: Request,
               store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    draft.editor.drag.start(req.index, len(draft.editor.blocks))
    return _view(draft)


@router.post(_API + "/drag/over")
def drag_over(member_id: str, work_id: str, req: DragOverRequest, request: Request,
              store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    side = req.side
    if req.pointer_y is not None and req.top is not None and req.height is not None:
        side = drop_side(req.pointer_y, req.top, req.height)
    if side is None:
        raise HTTPException(400, "side ou pointerY/top/height requis")
    draft.editor.drag.over(req.target, side)
    return _view(draft)


@router.post(_API + "/drag/leave")
def drag_leave(member_id: str, work_id: str, request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    draft.editor.drag.leave()
    return _view(draft)


@router.post(_API + "/drag/drop")
def drag_drop(member_id: str, work_id: str, request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    draft.editor.drop()
    return _view(draft)


@router.post(_API + "/drag/end")
def drag_end(member_id: str, work_id: str, request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    draft.editor.drag.end()
    return _view(draft)


# ── Save / discard ─────────────────────────────────────────────────────────────

@router.post(_API + "/save")
def save_draft(member_id: str, work_id: str, request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    work = draft.to_work()
    if store.replace_work(member_id, work) is None:
        get_drafts(request).pop((member_id, work_id), None)
        raise HTTPException(404, "Œuvre introuvable")
    draft.save()
    log.info("Œuvre %s/%s enregistrée (%d blocs)", member_id, work_id, len(work.blocks))
    return _view(draft)


@router.post(_API + "/discard")
def discard_draft(member_id: str, work_id: str, request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    draft = _draft(request, store, member_id, work_id)
    draft.discard()
    return _view(draft)
