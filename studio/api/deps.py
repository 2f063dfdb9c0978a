"""Dépendances FastAPI partagées — store injecté au startup, garde admin."""
import os
from typing import Dict, Tuple

from fastapi import HTTPException, Request

from page_builder.editor import WorkDraft

from ..storage import ContentStore


def admin_token() -> str:
    return os.getenv("ADMIN_TOKEN", "changeme")


def check_admin(request: Request) -> str:
    token = (request.headers.get("X-Admin-Token")
             or request.query_params.get("token")
             or request.cookies.get("admin_token", ""))
    if token != admin_token():
        raise HTTPException(403, "Accès refusé")
    return token


def get_store(request: Request) -> ContentStore:
    return request.app.state.store


def get_drafts(request: Request) -> Dict[Tuple[str, str], WorkDraft]:
    return request.app.state.drafts
