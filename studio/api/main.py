"""
AURORA STUDIO — FastAPI app
Démarrer : uvicorn studio.api.main:app --reload --port 8001
"""
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from page_builder import __version__ as page_builder_version
from page_builder.router import router as page_builder_router

from .. import __version__

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Aurora — Creative Multimedia Studio", version=__version__, docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


@app.middleware("http")
async def redirect_403_to_login(request: Request, call_next):
    """Redirige les 403 sur /admin/* vers /admin/login pour les navigateurs."""
    response = await call_next(request)
    path = request.url.path
    accept = request.headers.get("accept", "")
    is_browser = "text/html" in accept
    if (response.status_code == 403
            and path.startswith("/admin")
            and not path.startswith("/api/admin")
            and is_browser):
        return RedirectResponse("/admin/login", status_code=303)
    return response


@app.on_event("startup")
def startup():
    from ..storage import ContentStore
    app.state.store = ContentStore().open()
    app.state.drafts = {}
    log.info("Store ouvert (source : %s), page_builder %s", app.state.store.data_source.value, page_builder_version)


@app.on_event("shutdown")
def shutdown():
    store = getattr(app.state, "store", None)
    if store is not None:
        store.close()
    app.state.drafts = {}


@app.get("/health")
def health():
    return {"status": "ok", "service": "aurora_studio", "version": __version__}


# ── Routes ──
from .routes import public, login, admin, editor, sync

app.include_router(public.router)
app.include_router(login.router)
app.include_router(admin.router)
app.include_router(editor.router)
app.include_router(sync.router)
app.include_router(page_builder_router)
