"""
Export / import du contenu du site.

Exports :
  backup  → {"siteContent": {...}, "teamMembers": [...]}
  bundle  → clés = chemins du repo (public/data/site.json, public/data/team/index.json,
            public/data/team/<membre>.json)

Import (format détecté automatiquement, dans cet ordre) :
  1. backup          (siteContent + teamMembers)
  2. bundle GitHub   (clé public/data/site.json)
  3. fichier membre  (id + name + works[]) — fusion sur le membre existant, id inconnu refusé
  4. réglages site   (studioName)
"""
import logging
import re
from typing import Any, Dict

from page_builder.core.schemas import TeamMember

from .storage import ContentStore

log = logging.getLogger(__name__)

BUNDLE_ROOT = "public/data"
SITE_FILE   = f"{BUNDLE_ROOT}/site.json"
INDEX_FILE  = f"{BUNDLE_ROOT}/team/index.json"


class TransferError(ValueError):
    """Payload d'import non reconnu ou rejeté."""


def member_file_name(member_id: str) -> str:
    """Nom de fichier (sans extension) d'un membre : id en minuscules, séparateurs → '-'."""
    slug = re.sub(r"[^a-z0-9]+", "-", (member_id or "").lower()).strip("-")
    return slug or "member"


def member_path(member_id: str) -> str:
    return f"{BUNDLE_ROOT}/team/{member_file_name(member_id)}.json"


def export_backup(store: ContentStore) -> dict:
    return {
        "siteContent": store.site_content.to_json_dict(),
        "teamMembers": [m.to_json_dict() for m in store.team_members],
    }


def export_bundle(store: ContentStore) -> Dict[str, Any]:
    members = store.team_members
    bundle: Dict[str, Any] = {
        SITE_FILE:  store.site_content.to_json_dict(),
        INDEX_FILE: {"members": [member_file_name(m.id) for m in members]},
    }
    for m in members:
        bundle[member_path(m.id)] = m.to_json_dict()
    return bundle


def _validate(store: ContentStore, site: Any, members: list) -> list:
    """Valide réglages + membres avant toute écriture (ValidationError → rien n'est modifié)."""
    if isinstance(site, dict):
        store.site_content.merged(site)
    return [TeamMember.model_validate(m) for m in members]


def _import_bundle(store: ContentStore, data: dict) -> str:
    site = data.get(SITE_FILE)
    members = []
    index = data.get(INDEX_FILE)
    if isinstance(index, dict) and isinstance(index.get("members"), list):
        for name in index["members"]:
            member = data.get(f"{BUNDLE_ROOT}/team/{name}.json")
            if not isinstance(member, dict):
                log.warning("Import bundle : fichier membre %s absent", name)
                continue
            if not member.get("firstName") and member.get("shortName"):
                member = {**member, "firstName": member["shortName"]}
            members.append(member)

    team = _validate(store, site, members)
    if isinstance(site, dict):
        store.update_site_content(site)
    if team:
        store.update_team_members(team)
    return "Imported from GitHub bundle!"


def import_payload(store: ContentStore, data: Any) -> str:
    """Applique `data` au store ; retourne le message de succès, lève TransferError sinon."""
    if not isinstance(data, dict):
        raise TransferError("Unrecognized JSON format")

    if data.get("siteContent") and data.get("teamMembers"):
        if not isinstance(data["siteContent"], dict) or not isinstance(data["teamMembers"], list):
            raise TransferError("Unrecognized JSON format")
        team = _validate(store, data["siteContent"], data["teamMembers"])
        store.update_site_content(data["siteContent"])
        store.update_team_members(team)
        return "Imported from backup!"

    if data.get(SITE_FILE):
        return _import_bundle(store, data)

    if data.get("id") and data.get("name") and isinstance(data.get("works"), list):
        updated = store.update_team_member(data["id"], data)
        if updated is None:
            raise TransferError("Member ID not found. Import skipped.")
        return f"Imported {updated.first_name or updated.name}'s profile!"

    if data.get("studioName"):
        store.update_site_content(data)
        return "Site settings imported!"

    raise TransferError("Unrecognized JSON format")
