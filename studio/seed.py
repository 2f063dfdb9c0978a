"""
Contenu d'usine du site — équipe + œuvres.
Sert de valeur initiale du store et de cible de `reset_to_defaults()`.
"""
import copy
from typing import List

from page_builder.core.schemas import SiteContent, TeamMember

_UNSPLASH = "https://images.unsplash.com/photo-{}?w=600&h=400&fit=crop"
_AVATAR   = "https://images.unsplash.com/photo-{}?w=200&h=200&fit=crop&crop=face"


def _work(wid: str, title: str, description: str, tools: list, photo: str, **extra) -> dict:
    return {"id": wid, "title": title, "description": description, "tools": tools,
            "image": _UNSPLASH.format(photo), **extra}


# Étude de cas de démonstration : un exemple de chaque famille de blocs
_NEON_HORIZONS_BLOCKS = [
    {"id": "blk_hero001", "type": "hero-image", "image": _UNSPLASH.format("1626785774573-4b799315345d"),
     "heading": "Neon Horizons", "body": "Brand identity for a tech startup exploring AR interfaces"},
    {"id": "blk_text001", "type": "text", "heading": "The Brief",
     "body": "A visual language for interfaces that float between the physical and the digital.",
     "alignment": "center"},
    {"id": "blk_grid001", "type": "image-grid-3", "gap": 6, "images": [
        {"url": _UNSPLASH.format("1558618666-fcd25c85f82e"), "caption": "Poster study"},
        {"url": _UNSPLASH.format("1611532736597-de2d4265fba3"), "caption": "Type specimen", "zoom": 120},
        {"url": _UNSPLASH.format("1634942536846-e9863ef87500"), "caption": "Packaging",
         "objectX": 30, "objectY": 60},
    ]},
    {"id": "blk_quote01", "type": "quote", "quote": "Design is the silent ambassador of your brand.",
     "author": "Paul Rand"},
    {"id": "blk_space01", "type": "spacer", "size": "md"},
    {"id": "blk_video01", "type": "video", "videoUrl": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
     "heading": "Motion Identity", "caption": "Logo animation"},
]

_TEAM_MEMBERS: List[dict] = [
    {
        "id": "gian", "name": "Gian Carlo Sambayan", "firstName": "Gian Carlo", "role": "Graphic Design",
        "tagline": "Turning ideas into visual stories",
        "skills": ["Brand Identity", "Typography", "UI Design", "Illustration", "Print Design", "Layout Design"],
        "accentColor": "#6366F1", "accentColorRGB": "99, 102, 241", "email": "gian@aurorastudio.com",
        "socials": [{"platform": "Behance", "url": "#"}, {"platform": "Dribbble", "url": "#"},
                    {"platform": "Instagram", "url": "#"}],
        "works": [
            _work("g1", "Neon Horizons", "Brand identity for a tech startup exploring the future of AR interfaces",
                  ["Illustrator", "Photoshop"], "1626785774573-4b799315345d", contentBlocks=_NEON_HORIZONS_BLOCKS),
            _work("g2", "Botanical Series", "Minimalist poster collection inspired by Japanese botanical art",
                  ["Illustrator", "InDesign"], "1558618666-fcd25c85f82e"),
            _work("g3", "Metro Typeface", "Custom geometric sans-serif typeface designed for urban wayfinding",
                  ["Glyphs", "Illustrator"], "1611532736597-de2d4265fba3"),
        ],
        "avatar": _AVATAR.format("1507003211169-0a1dd7228f2d"),
    },
    {
        "id": "sergs", "name": "Sergs Dimaano", "firstName": "Sergs", "role": "3D Animation",
        "tagline": "Bringing dimensions to life",
        "skills": ["3D Modeling", "Character Animation", "Motion Graphics", "VFX", "Rigging", "Texturing"],
        "accentColor": "#EC4899", "accentColorRGB": "236, 72, 153", "email": "sergs@aurorastudio.com",
        "socials": [{"platform": "ArtStation", "url": "#"}, {"platform": "Vimeo", "url": "#"},
                    {"platform": "Instagram", "url": "#"}],
        "works": [
            _work("s1", "Celestial Drift", "Animated short film exploring cosmic phenomena through abstract 3D forms",
                  ["Blender", "After Effects"], "1634017839464-5c339afa60f0"),
            _work("s2", "Mecha Genesis", "Character design and animation for a sci-fi game trailer",
                  ["Maya", "ZBrush"], "1620641788421-7a1c342ea42e"),
            _work("s3", "Fluid Dynamics", "Real-time simulation of liquid physics for product visualization",
                  ["Houdini", "Redshift"], "1618005182384-a83a8bd57fbe"),
        ],
        "avatar": _AVATAR.format("1506794778202-cad84cf45f1d"),
    },
    {
        "id": "lorie", "name": "Lorie Jane Levita", "firstName": "Lorie Jane", "role": "Short/Long Form Videos",
        "tagline": "Crafting narratives frame by frame",
        "skills": ["Video Editing", "Color Grading", "Storytelling", "Sound Design", "Cinematography", "Motion Graphics"],
        "accentColor": "#F59E0B", "accentColorRGB": "245, 158, 11", "email": "lorie@aurorastudio.com",
        "socials": [{"platform": "YouTube", "url": "#"}, {"platform": "Vimeo", "url": "#"},
                    {"platform": "Instagram", "url": "#"}],
        "works": [
            _work("l1", "Golden Hour", "Documentary short capturing the magic of Manila's sunset communities",
                  ["Premiere Pro", "DaVinci"], "1536240478700-b869070f9279"),
            _work("l2", "Street Rhythms", "Music video featuring underground artists and urban choreography",
                  ["Final Cut", "After Effects"], "1492691527719-9d1e07e534b4"),
            _work("l3", "Taste of Home", "Food documentary series exploring regional Filipino cuisine traditions",
                  ["Premiere Pro", "Audition"], "1504674900247-0877df9cc836"),
        ],
        "avatar": _AVATAR.format("1494790108377-be9c29b29330"),
    },
    {
        "id": "rica", "name": "Rica Mea Hernandez", "firstName": "Rica Mea", "role": "Modelling",
        "tagline": "Sculpting digital perfection",
        "skills": ["3D Modelling", "Sculpting", "Texturing", "UV Mapping", "Hard Surface", "Organic Modelling"],
        "accentColor": "#10B981", "accentColorRGB": "16, 185, 129", "email": "rica@aurorastudio.com",
        "socials": [{"platform": "ArtStation", "url": "#"}, {"platform": "Behance", "url": "#"},
                    {"platform": "Instagram", "url": "#"}],
        "works": [
            _work("r1", "Ancient Ruins", "Detailed environment modelling of a lost civilization temple complex",
                  ["ZBrush", "Substance Painter"], "1518709268805-4e9042af9f23"),
            _work("r2", "Cyber Samurai", "High-poly character model blending feudal armor with cyberpunk aesthetics",
                  ["ZBrush", "Maya"], "1569701813229-33284b643e3c"),
            _work("r3", "Product Renders", "Photorealistic product visualization for consumer electronics brand",
                  ["Blender", "KeyShot"], "1523275335684-37898b6baf30"),
        ],
        "avatar": _AVATAR.format("1438761681033-6461ffad8d80"),
    },
    {
        "id": "erin", "name": "Erin Margarette Pasamba", "firstName": "Erin", "role": "Photography",
        "tagline": "Capturing moments, creating memories",
        "skills": ["Portrait", "Landscape", "Product Photography", "Photo Editing", "Lighting", "Composition"],
        "accentColor": "#8B5CF6", "accentColorRGB": "139, 92, 246", "email": "erin@aurorastudio.com",
        "socials": [{"platform": "Instagram", "url": "#"}, {"platform": "500px", "url": "#"},
                    {"platform": "Behance", "url": "#"}],
        "works": [
            _work("e1", "Urban Solitude", "Street photography series exploring isolation in crowded Asian cities",
                  ["Lightroom", "Photoshop"], "1449824913935-59a10b8d2000"),
            _work("e2", "Porcelain", "Fine art portrait series with minimalist styling and soft lighting",
                  ["Capture One", "Photoshop"], "1531746020798-e6953c6e8e04"),
            _work("e3", "Made by Hand", "Documentary photography of traditional Filipino artisan craftspeople",
                  ["Lightroom", "Bridge"], "1452587925148-ce544e77e70d"),
        ],
        "avatar": _AVATAR.format("1534528741775-53994a69daeb"),
    },
]


def default_site_content() -> SiteContent:
    return SiteContent()


def default_team_members() -> List[TeamMember]:
    return [TeamMember.model_validate(copy.deepcopy(m)) for m in _TEAM_MEMBERS]
