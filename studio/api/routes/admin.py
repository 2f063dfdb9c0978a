"""
Admin — tableau de bord + API contenu du site.

GET  /admin                      → UI admin (réglages, équipe, œuvres, export/import, sync)
GET  /api/admin/site             → réglages du site
PUT  /api/admin/site             → fusion partielle des réglages
PUT  /api/admin/members/{id}     → fusion partielle d'un membre
POST /api/admin/reset            → retour aux valeurs d'usine
GET  /api/admin/export/backup    → {siteContent, teamMembers}
GET  /api/admin/export/bundle    → fichiers public/data/… prêts pour le repo
POST /api/admin/import           → import auto-détecté (backup, bundle, membre, réglages)
"""
import json
import logging
from datetime import date
from html import escape as _e
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError

from ...github_sync import GitHubSync
from ...models import DataSource
from ...storage import ContentStore
from ...transfer import TransferError, export_backup, export_bundle, import_payload, member_path
from ..deps import check_admin, get_drafts, get_store

log = logging.getLogger(__name__)
router = APIRouter(tags=["Admin"])

_SOURCE_LABELS = {
    DataSource.DEFAULT:   "📦 Factory defaults",
    DataSource.STORE:     "💾 Local store",
    DataSource.DATA_JSON: "📄 Deployed data/ folder (GitHub)",
}

ADMIN_CSS = """
*{box-sizing:border-box;margin:0;padding:0}
body{font-family:'Inter',system-ui,sans-serif;background:#f9fafb;color:#111827;font-size:14px}
.topbar{display:flex;justify-content:space-between;align-items:center;padding:12px 24px;background:#fff;
  border-bottom:1px solid #e5e7eb}
.topbar a{text-decoration:none;color:#4b5563;margin-left:16px}
.brand{font-weight:800;color:#6366f1!important;margin-left:0!important}
.wrap{max-width:1100px;margin:0 auto;padding:24px}
.card{background:#fff;border:1px solid #e5e7eb;border-radius:14px;padding:20px;margin-bottom:20px}
.card h2{font-size:16px;margin-bottom:12px}
.muted{color:#6b7280;font-size:12px}
table{width:100%;border-collapse:collapse}
td,th{text-align:left;padding:8px;border-bottom:1px solid #f3f4f6;vertical-align:top}
.btn{display:inline-block;padding:8px 14px;border-radius:8px;border:1px solid #e5e7eb;background:#fff;
  cursor:pointer;font-size:13px;text-decoration:none;color:#111827}
.btn--primary{background:#6366f1;border-color:#6366f1;color:#fff}
.btn--danger{color:#dc2626;border-color:#fecaca}
textarea,input[type=text],select{width:100%;border:1px solid #e5e7eb;border-radius:8px;padding:8px;
  font-family:ui-monospace,monospace;font-size:12px}
.pill{display:inline-block;font-size:11px;padding:2px 8px;border-radius:999px;background:#eef2ff;color:#4338ca}
#toast{position:fixed;right:20px;bottom:20px;padding:10px 16px;border-radius:8px;color:#fff;display:none}
"""

# fetch JSON + toast, partagé par les pages admin
ADMIN_JS = """
function toast(msg, ok){var t=document.getElementById('toast');t.textContent=msg;
  t.style.background=ok===false?'#dc2626':'#16a34a';t.style.display='block';
  setTimeout(function(){t.style.display='none';},2500);}
async function api(method, url, body){
  var r=await fetch(url,{method:method,headers:{'Content-Type':'application/json'},
    credentials:'same-origin',body:body===undefined?undefined:JSON.stringify(body)});
  var data=null;try{data=await r.json();}catch(e){}
  if(!r.ok){toast((data&&data.detail)||('HTTP '+r.status),false);throw new Error(r.status);}
  return data;}
"""


def admin_page(title: str, body: str, script: str = "") -> str:
    return f"""<!DOCTYPE html><html lang="en"><head>
<meta charset="UTF-8"><meta name="viewport" content="width=device-width,initial-scale=1">
<title>{_e(title)} — Aurora Admin</title>
<style>{ADMIN_CSS}</style>
</head><body>
<div class="topbar">
  <div><a class="brand" href="/admin">Aurora Admin</a><a href="/" target="_blank">View site ↗</a></div>
  <a href="/admin/logout">Logout</a>
</div>
<div class="wrap">{body}</div>
<div id="toast"></div>
<script>{ADMIN_JS}{script}</script>
</body></html>"""


# ── Dashboard HTML ─────────────────────────────────────────────────────────

@router.get("/admin", response_class=HTMLResponse)
def admin_dashboard(request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    site = store.site_content

    rows = ""
    for m in store.team_members:
        works = "".join(
            f'<div style="margin-bottom:4px">{_e(w.title)} '
            f'<span class="pill">{len(w.blocks)} blocks</span> '
            f'<a href="/admin/works/{_e(m.id)}/{_e(w.id)}">Edit</a> · '
            f'<a href="/work/{_e(m.id)}/{_e(w.id)}" target="_blank">View</a></div>'
            for w in m.works
        )
        rows += f"""<tr>
            <td><b style="color:{_e(m.accent_color)}">{_e(m.name)}</b><br><span class="muted">{_e(m.role)}</span></td>
            <td class="muted">{_e(member_path(m.id))}</td>
            <td>{works}</td>
        </tr>"""

    sync_enabled = GitHubSync.from_env() is not None
    sync_html = (
        '<button class="btn" onclick="sync(\'pull\')">⬇ Pull from GitHub</button> '
        '<button class="btn btn--primary" onclick="sync(\'push\')">⬆ Push to GitHub</button>'
        if sync_enabled else
        '<p class="muted">Set GITHUB_TOKEN and GITHUB_REPO to enable remote sync.</p>'
    )

    body = f"""
<div class="card">
  <h2>Data source</h2>
  <p>{_SOURCE_LABELS.get(store.data_source, store.data_source)}</p>
</div>

<div class="card">
  <h2>Site settings</h2>
  <textarea id="site" rows="14">{_e(_pretty(site.to_json_dict()))}</textarea>
  <p style="margin-top:10px"><button class="btn btn--primary" onclick="saveSite()">Save settings</button></p>
</div>

<div class="card">
  <h2>Team &amp; works</h2>
  <table><tr><th>Member</th><th>File</th><th>Works</th></tr>{rows}</table>
</div>

<div class="card">
  <h2>Export &amp; import</h2>
  <p style="margin-bottom:10px">
    <a class="btn" href="/api/admin/export/backup">Download backup</a>
    <a class="btn" href="/api/admin/export/bundle">Download GitHub bundle</a>
  </p>
  <p class="muted">Import auto-detects the format: bundle, backup, site settings, or individual member file.</p>
  <p style="margin-top:8px"><input type="file" id="importFile" accept=".json"></p>
  <p style="margin-top:16px"><button class="btn btn--danger" onclick="resetAll()">Reset to defaults</button></p>
</div>

<div class="card">
  <h2>Remote sync</h2>
  {sync_html}
</div>"""

    script = """
function reload(){setTimeout(function(){location.reload();},600);}
async function saveSite(){
  var data;try{data=JSON.parse(document.getElementById('site').value);}catch(e){toast('Invalid JSON',false);return;}
  await api('PUT','/api/admin/site',data);toast('Site settings saved');}
async function resetAll(){if(!confirm('Reset all content to factory defaults?'))return;
  await api('POST','/api/admin/reset');toast('Reset to defaults');reload();}
async function sync(dir){var r=await api('POST','/api/admin/sync/'+dir);toast(r.message);reload();}
document.getElementById('importFile').addEventListener('change',async function(e){
  var f=e.target.files[0];if(!f)return;var data;
  try{data=JSON.parse(await f.text());}catch(err){toast('Failed to parse JSON file',false);return;}
  var r=await api('POST','/api/admin/import',data);toast(r.message);reload();});
"""
    return HTMLResponse(admin_page("Dashboard", body, script))


def _pretty(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def _attachment(data: Any, prefix: str) -> JSONResponse:
    filename = f"{prefix}-{date.today().isoformat()}.json"
    return JSONResponse(data, headers={"Content-Disposition": f'attachment; filename="{filename}"'})


# ── API contenu ────────────────────────────────────────────────────────────

@router.get("/api/admin/site")
def get_site(request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    return {"siteContent": store.site_content.to_json_dict(), "dataSource": store.data_source.value}


@router.put("/api/admin/site")
def update_site(request: Request, partial: Dict[str, Any] = Body(...),
                store: ContentStore = Depends(get_store)):
    check_admin(request)
    try:
        site = store.update_site_content(partial)
    except ValidationError as e:
        raise HTTPException(400, f"Réglages invalides : {e.error_count()} erreur(s)")
    return {"siteContent": site.to_json_dict()}


@router.put("/api/admin/members/{member_id}")
def update_member(member_id: str, request: Request, partial: Dict[str, Any] = Body(...),
                  store: ContentStore = Depends(get_store)):
    check_admin(request)
    try:
        member = store.update_team_member(member_id, partial)
    except ValidationError as e:
        raise HTTPException(400, f"Membre invalide : {e.error_count()} erreur(s)")
    if member is None:
        raise HTTPException(404, "Membre introuvable")
    # les brouillons ouverts sur ce membre ne reflètent plus le contenu validé
    drafts = get_drafts(request)
    for key in [k for k in drafts if k[0] == member_id]:
        drafts.pop(key)
    return member.to_json_dict()


@router.post("/api/admin/reset")
def reset(request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    store.reset_to_defaults()
    get_drafts(request).clear()
    return {"ok": True, "dataSource": store.data_source.value}


@router.get("/api/admin/export/backup")
def export_backup_route(request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    return _attachment(export_backup(store), "aurora-backup")


@router.get("/api/admin/export/bundle")
def export_bundle_route(request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    return _attachment(export_bundle(store), "aurora-bundle")


@router.post("/api/admin/import")
def import_route(request: Request, data: Any = Body(...), store: ContentStore = Depends(get_store)):
    check_admin(request)
    try:
        message = import_payload(store, data)
    except TransferError as e:
        raise HTTPException(400, str(e))
    except ValidationError as e:
        raise HTTPException(400, f"Contenu invalide : {e.error_count()} erreur(s)")
    get_drafts(request).clear()
    log.info("Import admin : %s", message)
    return {"ok": True, "message": message}
