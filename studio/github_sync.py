"""
Synchronisation distante — fichier data.json dans un repo GitHub (API contents).

  fetch()              → (data, sha) ; (None, None) si le fichier n'existe pas encore
  push(data, message)  → crée ou met à jour le fichier (sha précédent envoyé si présent)

Config (env) : GITHUB_TOKEN, GITHUB_REPO (owner/repo), GITHUB_BRANCH, GITHUB_DATA_PATH, GITHUB_API_URL.
"""
import base64
import json
import logging
import os
from typing import Any, Optional, Tuple

import requests as http

log = logging.getLogger(__name__)

_TIMEOUT = 15


class SyncError(Exception):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class GitHubSync:

    def __init__(self, token: str, repo: str, branch: str = "main",
                 path: str = "public/data/data.json", api_url: str = "https://api.github.com"):
        self.token   = token
        self.repo    = repo
        self.branch  = branch
        self.path    = path
        self.api_url = api_url.rstrip("/")

    @classmethod
    def from_env(cls) -> Optional["GitHubSync"]:
        """None si GITHUB_TOKEN ou GITHUB_REPO manquent (sync désactivée)."""
        token = os.getenv("GITHUB_TOKEN", "")
        repo  = os.getenv("GITHUB_REPO", "")
        if not token or not repo:
            return None
        return cls(
            token=token,
            repo=repo,
            branch=os.getenv("GITHUB_BRANCH", "main"),
            path=os.getenv("GITHUB_DATA_PATH", "public/data/data.json"),
            api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
        )

    @property
    def _url(self) -> str:
        return f"{self.api_url}/repos/{self.repo}/contents/{self.path}"

    @property
    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
        }

    def fetch(self) -> Tuple[Optional[Any], Optional[str]]:
        try:
            resp = http.get(self._url, headers=self._headers, params={"ref": self.branch}, timeout=_TIMEOUT)
        except http.RequestException as e:
            raise SyncError(f"GitHub injoignable : {e}") from e

        if resp.status_code == 404:
            log.info("GitHub : %s absent de %s@%s", self.path, self.repo, self.branch)
            return None, None
        if resp.status_code != 200:
            raise SyncError(f"GitHub GET {self.path} → HTTP {resp.status_code}", resp.status_code)

        body = resp.json()
        try:
            data = json.loads(base64.b64decode(body.get("content", "")).decode("utf-8"))
        except ValueError as e:
            raise SyncError(f"Contenu de {self.path} illisible : {e}") from e
        return data, body.get("sha")

    def push(self, data: Any, message: str = "Update site content") -> str:
        """Écrit `data` (JSON indenté) ; retourne le sha du nouveau contenu."""
        _, sha = self.fetch()
        payload = {
            "message": message,
            "content": base64.b64encode(
                json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")
            ).decode("ascii"),
            "branch": self.branch,
        }
        if sha:
            payload["sha"] = sha

        try:
            resp = http.put(self._url, headers=self._headers, json=payload, timeout=_TIMEOUT)
        except http.RequestException as e:
            raise SyncError(f"GitHub injoignable : {e}") from e

        if resp.status_code not in (200, 201):
            raise SyncError(f"GitHub PUT {self.path} → HTTP {resp.status_code}", resp.status_code)

        new_sha = (resp.json().get("content") or {}).get("sha", "")
        log.info("GitHub : %s poussé sur %s@%s (%s)", self.path, self.repo, self.branch, new_sha[:7])
        return new_sha
