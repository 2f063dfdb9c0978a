"""
Pages publiques — accueil du collectif + vue projet.

GET /                          → hero, équipe + œuvres, contact
GET /work/{member_id}/{work_id} → étude de cas (blocs de contenu ou AutoLayout)
"""
from html import escape as _e

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from page_builder.core.schemas import SiteContent, TeamMember
from page_builder.renderer.html import render_work_page

from ...storage import ContentStore
from ..deps import get_store

router = APIRouter(tags=["Public"])

_CSS = """
*{box-sizing:border-box;margin:0;padding:0}
body{font-family:'Inter',system-ui,sans-serif;color:#111827;background:#fff;line-height:1.6}
a{color:inherit}
.nav{position:sticky;top:0;z-index:20;display:flex;justify-content:space-between;align-items:center;
  padding:14px 32px;background:rgba(255,255,255,.85);backdrop-filter:blur(12px);border-bottom:1px solid #f3f4f6}
.nav__brand{font-weight:800;font-size:1.2rem;text-decoration:none}
.nav__links a{margin-left:24px;font-size:14px;text-decoration:none;color:#4b5563}
.hero{padding:120px 32px 80px;text-align:center;max-width:960px;margin:0 auto}
.hero__tagline{letter-spacing:.2em;text-transform:uppercase;font-size:12px;color:#6366f1;font-weight:700}
.hero__title{font-size:4.5rem;font-weight:900;line-height:1.05;margin:16px 0}
.hero__subtitle{font-size:1.25rem;color:#4b5563}
.hero__description{color:#9ca3af;margin-top:8px}
.disciplines{display:flex;justify-content:center;flex-wrap:wrap;gap:10px;margin-top:32px}
.disciplines span{padding:6px 14px;border:1px solid #e5e7eb;border-radius:999px;font-size:13px}
.section{padding:80px 32px;max-width:1200px;margin:0 auto}
.section__eyebrow{letter-spacing:.2em;text-transform:uppercase;font-size:12px;color:#9ca3af;font-weight:700}
.section__title{font-size:2.5rem;font-weight:800;margin:8px 0}
.section__description{color:#4b5563;max-width:640px}
.team{display:grid;grid-template-columns:repeat(auto-fill,minmax(320px,1fr));gap:32px;margin-top:48px}
.member{border:1px solid #f3f4f6;border-radius:20px;padding:28px}
.member__head{display:flex;gap:16px;align-items:center}
.member__avatar{width:64px;height:64px;border-radius:50%;object-fit:cover}
.member__name{font-weight:700}
.member__role{font-size:13px;font-weight:600}
.member__tagline{color:#6b7280;font-size:14px;margin-top:12px}
.member__skills{display:flex;flex-wrap:wrap;gap:6px;margin-top:12px}
.member__skills span{font-size:11px;padding:3px 10px;border-radius:999px;background:#f9fafb}
.works{display:grid;grid-template-columns:repeat(3,1fr);gap:8px;margin-top:20px}
.work{display:block;position:relative;border-radius:10px;overflow:hidden;aspect-ratio:3/2}
.work img{width:100%;height:100%;object-fit:cover}
.work span{position:absolute;left:0;right:0;bottom:0;padding:6px 8px;font-size:11px;color:#fff;
  background:linear-gradient(to top,rgba(0,0,0,.7),transparent)}
.contact{text-align:center;background:#0b0b12;color:#fff;padding:100px 32px}
.contact__title{font-size:3rem;font-weight:900}
.contact__description{color:#9ca3af;margin:12px 0 28px}
.contact__email{display:inline-block;padding:14px 28px;border-radius:999px;background:#fff;color:#111;
  text-decoration:none;font-weight:700}
.footer{text-align:center;font-size:12px;color:#9ca3af;padding:24px}
"""


def _member_card(m: TeamMember) -> str:
    skills = "".join(f"<span>{_e(s)}</span>" for s in m.skills)
    works = "".join(
        f'<a class="work" href="/work/{_e(m.id)}/{_e(w.id)}">'
        f'<img src="{_e(w.image)}" alt="{_e(w.title)}" loading="lazy"><span>{_e(w.title)}</span></a>'
        for w in m.works
    )
    avatar = f'<img class="member__avatar" src="{_e(m.avatar)}" alt="{_e(m.name)}">' if m.avatar else ""
    return f"""<article class="member" id="member-{_e(m.id)}">
  <div class="member__head">
    {avatar}
    <div>
      <p class="member__name">{_e(m.name)}</p>
      <p class="member__role" style="color:{_e(m.accent_color)}">{_e(m.role)}</p>
    </div>
  </div>
  <p class="member__tagline">{_e(m.tagline)}</p>
  <div class="member__skills">{skills}</div>
  <div class="works">{works}</div>
</article>"""


def render_home(site: SiteContent, members: list) -> str:
    disciplines = "".join(f"<span>{_e(d)}</span>" for d in site.disciplines)
    team = "".join(_member_card(m) for m in members)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{_e(site.studio_name)} — {_e(site.studio_tagline)}</title>
  <meta name="description" content="{_e(site.hero_subtitle)}">
  <style>{_CSS}</style>
</head>
<body>
<nav class="nav">
  <a class="nav__brand" href="/">{_e(site.studio_name)}</a>
  <div class="nav__links"><a href="#team">Team</a><a href="#contact">Contact</a></div>
</nav>

<header class="hero">
  <p class="hero__tagline">{_e(site.studio_tagline)}</p>
  <h1 class="hero__title">{_e(site.studio_name)}</h1>
  <p class="hero__subtitle">{_e(site.hero_subtitle)}</p>
  <p class="hero__description">{_e(site.hero_description)}</p>
  <div class="disciplines">{disciplines}</div>
</header>

<section class="section" id="team">
  <p class="section__eyebrow">{_e(site.team_section_subtitle)}</p>
  <h2 class="section__title">{_e(site.team_section_title)}</h2>
  <p class="section__description">{_e(site.team_section_description)}</p>
  <div class="team">{team}</div>
</section>

<section class="contact" id="contact">
  <h2 class="contact__title">{_e(site.contact_heading)}</h2>
  <p class="contact__description">{_e(site.contact_description)}</p>
  <a class="contact__email" href="mailto:{_e(site.contact_email)}">{_e(site.contact_email)}</a>
</section>

<footer class="footer">© {_e(site.studio_name)} — {_e(site.studio_tagline)}</footer>
</body>
</html>"""


@router.get("/", response_class=HTMLResponse)
def home(store: ContentStore = Depends(get_store)):
    return HTMLResponse(render_home(store.site_content, store.team_members))


@router.get("/work/{member_id}/{work_id}", response_class=HTMLResponse)
def work_page(member_id: str, work_id: str, store: ContentStore = Depends(get_store)):
    member = store.get_member(member_id)
    if not member:
        raise HTTPException(404, "Membre introuvable")
    work = member.get_work(work_id)
    if not work:
        raise HTTPException(404, "Œuvre introuvable")
    return HTMLResponse(render_work_page(
        work, member,
        site_name=store.site_content.studio_name,
        back_href=f"/#member-{member.id}",
    ))
