# engine/storage.py
import json
import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from ..data_model import Profile

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


@dataclass
class StorageResult:
    ok: bool
    profiles: List[Profile] = field(default_factory=list)
    error: Optional[str] = None


def ensure_user_data_dir(path: str) -> None:
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


def _records_from_document(document) -> list:
    if isinstance(document, list):
        return document
    if isinstance(document, dict) and isinstance(document.get("profiles"), list):
        return document["profiles"]
    raise TypeError("Stored profiles must be a list or an object with a 'profiles' list")


def load_profiles(path: str) -> StorageResult:
    if not os.path.exists(path):
        return StorageResult(ok=True)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw_text = f.read().strip()
        if not raw_text:
            return StorageResult(ok=True)
        records = _records_from_document(json.loads(raw_text))
        profiles = [Profile.from_record(record) for record in records]
    except (json.JSONDecodeError, OSError, UnicodeDecodeError, AttributeError, KeyError, TypeError, ValueError) as exc:
        message = f"Failed to load profiles from {path}: {exc}"
        logger.warning(message)
        return StorageResult(ok=False, error=message)
    logger.debug("Loaded %d profiles from %s", len(profiles), path)
    return StorageResult(ok=True, profiles=profiles)


def save_profiles(path: str, profiles: List[Profile]) -> StorageResult:
    tmp_path = f"{path}.tmp"
    document = {
        "version": FORMAT_VERSION,
        "profiles": [profile.to_record() for profile in profiles],
    }
    try:
        ensure_user_data_dir(path)
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2)
        os.replace(tmp_path, path)
    except (OSError, TypeError, ValueError) as exc:
        message = f"Failed to save profiles to {path}: {exc}"
        logger.warning(message)
        return StorageResult(ok=False, profiles=list(profiles), error=message)
    logger.debug("Saved %d profiles to %s", len(profiles), path)
    return StorageResult(ok=True, profiles=list(profiles))
