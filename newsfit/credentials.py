"""Persist the Claude API key in a small JSON file."""

from __future__ import annotations

import json
from pathlib import Path

from newsfit.config import ANTHROPIC_API_KEY, API_KEY_STORAGE_KEY, CREDENTIALS_PATH


class CredentialStore:
    """Get/set the single API key stored under a fixed name.

    ``fallback`` (the ANTHROPIC_API_KEY from .env by default) is returned when
    nothing has been saved.
    """

    def __init__(self, path: Path = CREDENTIALS_PATH, fallback: str = ANTHROPIC_API_KEY):
        self.path = Path(path)
        self.fallback = fallback

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        return data if isinstance(data, dict) else {}

    def get(self) -> str:
        return self._read().get(API_KEY_STORAGE_KEY, "") or self.fallback

    def set(self, api_key: str) -> None:
        data = self._read()
        data[API_KEY_STORAGE_KEY] = api_key
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        try:
            self.path.chmod(0o600)
        except OSError as e:
            print(f"  Warning: could not restrict permissions on {self.path} ({e})")
