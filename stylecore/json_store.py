# File: stylecore/json_store.py
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional


# -----------------------------
# Exceptions
# -----------------------------

@dataclass
class JsonStoreError(Exception):
    path: Path
    message: str
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        base = f"{self.message} (path={self.path})"
        if self.cause is not None:
            return f"{base}; cause={type(self.cause).__name__}: {self.cause}"
        return base


class JsonReadError(JsonStoreError):
    pass


class DirCreateError(JsonStoreError):
    pass


# -----------------------------
# Public helpers
# -----------------------------

def ensure_dir(dir_path: Path) -> None:
    """
    Ensure a directory exists (mkdir -p).
    """
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except Exception as e:
        raise DirCreateError(path=dir_path, message="Failed to create directory", cause=e) from e


def read_json(path: Path, *, default: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Read JSON as dict.

    - If file doesn't exist or is empty: return `default` (or {}).
    - If JSON is invalid or not a JSON object: raise JsonReadError.
    """
    if default is None:
        default = {}

    try:
        if not path.exists():
            return dict(default)

        raw = path.read_text(encoding="utf-8").strip()
        if raw == "":
            return dict(default)

        data = json.loads(raw)
        if not isinstance(data, dict):
            raise JsonReadError(path=path, message="JSON root must be an object/dict")
        return data

    except JsonStoreError:
        raise
    except Exception as e:
        raise JsonReadError(path=path, message="Failed to read/parse JSON", cause=e) from e
