"""
Admin login / logout — identifiant + mot de passe partagés + cookie de session.

GET  /admin/login  → page formulaire
POST /admin/login  → valide ADMIN_USERNAME / ADMIN_PASSWORD, pose le cookie admin_token, redirige vers /admin
GET  /admin/logout → efface le cookie, redirige vers /admin/login
"""
import logging
import os
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..deps import admin_token

log = logging.getLogger(__name__)
router = APIRouter(tags=["Auth"])


def _admin_username() -> str:
    return os.getenv("ADMIN_USERNAME", "admin")


def _admin_password() -> str:
    return os.getenv("ADMIN_PASSWORD", "admin123")


_CSS = """
*{box-sizing:border-box;margin:0;padding:0}
body{font-family:'Inter',sans-serif;background:#0b0b12;color:#e8e8f0;
  display:flex;align-items:center;justify-content:center;min-height:100vh}
.card{background:#15151f;border:1px solid #26263a;border-radius:16px;
  padding:48px 40px;width:100%;max-width:380px;text-align:center}
.logo{font-size:1.4rem;font-weight:bold;color:#fff;margin-bottom:4px}
.logo span{color:#6366f1}
.sub{color:#666;font-size:13px;margin-bottom:36px}
label{display:block;text-align:left;color:#9ca3af;font-size:12px;margin:14px 0 6px}
input{width:100%;background:#0b0b12;border:1px solid #26263a;
  color:#e8e8f0;border-radius:8px;padding:12px 14px;font-size:15px;
  font-family:inherit;outline:none}
input:focus{border-color:#6366f1}
.btn{display:block;width:100%;margin-top:24px;background:linear-gradient(135deg,#6366f1,#8b5cf6);color:#fff;
  border:none;padding:14px;border-radius:10px;font-size:15px;font-weight:700;
  cursor:pointer;transition:opacity .2s}
.btn:hover{opacity:.88}
.err{color:#f87171;font-size:13px;margin-top:14px}
"""


@router.get("/admin/login", response_class=HTMLResponse)
def login_page(error: str = ""):
    err_html = '<p class="err">Invalid credentials.</p>' if error else ""
    return HTMLResponse(f"""<!DOCTYPE html><html lang="en"><head>
<meta charset="UTF-8"><meta name="viewport" content="width=device-width,initial-scale=1">
<title>Admin — Aurora</title>
<style>{_CSS}</style>
</head><body>
<div class="card">
  <div class="logo">Aurora<span>.</span></div>
  <p class="sub">Admin Panel</p>
  <form method="POST" action="/admin/login">
    <label>Username</label>
    <input type="text" name="username" autofocus placeholder="admin">
    <label>Password</label>
    <input type="password" name="password" placeholder="••••••••">
    <button class="btn" type="submit">Sign In →</button>
  </form>
  {err_html}
</div>
</body></html>""")


@router.post("/admin/login")
async def login_submit(request: Request):
    form = await request.form()
    username = form.get("username", "")
    password = form.get("password", "")

    if username != _admin_username() or password != _admin_password():
        log.info("Connexion admin refusée (utilisateur %r)", username)
        return RedirectResponse("/admin/login?error=1", status_code=303)

    # Identifiants OK → pose le cookie admin_token
    resp = RedirectResponse("/admin", status_code=303)
    resp.set_cookie(
        key="admin_token",
        value=admin_token(),
        httponly=True,
        samesite="lax",
        max_age=60 * 60 * 24 * 7,   # 7 jours
        secure=False,
    )
    return resp


@router.get("/admin/logout")
def logout():
    resp = RedirectResponse("/admin/login", status_code=303)
    resp.delete_cookie("admin_token")
    return resp
