"""
Sync GitHub — publication / récupération du contenu du site.

POST /api/admin/sync/push → écrit {siteContent, teamMembers} dans GITHUB_DATA_PATH
POST /api/admin/sync/pull → importe le fichier distant dans le store
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError

from ...github_sync import GitHubSync, SyncError
from ...models import DataSource
from ...storage import ContentStore
from ...transfer import TransferError, export_backup, import_payload
from ..deps import check_admin, get_drafts, get_store

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/admin/sync", tags=["Sync"])


def _client() -> GitHubSync:
    client = GitHubSync.from_env()
    if client is None:
        raise HTTPException(400, "Sync GitHub non configurée (GITHUB_TOKEN / GITHUB_REPO)")
    return client


@router.post("/push")
def push(request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    client = _client()
    try:
        sha = client.push(export_backup(store), message="Update site content from admin")
    except SyncError as e:
        log.error("Sync push : %s", e)
        raise HTTPException(502, str(e))
    return {"ok": True, "sha": sha, "message": f"Pushed to {client.repo}@{client.branch}"}


@router.post("/pull")
def pull(request: Request, store: ContentStore = Depends(get_store)):
    check_admin(request)
    client = _client()
    try:
        data, sha = client.fetch()
    except SyncError as e:
        log.error("Sync pull : %s", e)
        raise HTTPException(502, str(e))
    if data is None:
        raise HTTPException(404, f"{client.path} absent de {client.repo}")

    try:
        message = import_payload(store, data)
    except TransferError as e:
        raise HTTPException(400, str(e))
    except ValidationError as e:
        raise HTTPException(400, f"Contenu distant invalide : {e.error_count()} erreur(s)")

    store.mark_source(DataSource.DATA_JSON)
    get_drafts(request).clear()
    return {"ok": True, "sha": sha, "message": message}
