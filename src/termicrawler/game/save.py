"""Save records -- JSON files and portable export strings.

A save holds the floor, the full player battler, the session seed, the
excluded battle words and the display language.  Export strings are the
JSON, zlib-compressed and encoded as URL-safe base64 so they can be pasted
between machines.
"""

from __future__ import annotations

import base64
import binascii
import json
import time
import zlib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from termicrawler.core.entities import Battler


class SaveError(Exception):
    """A save could not be read or decoded."""


class GameSaveData(BaseModel):
    """Everything needed to resume a game."""

    floor: int = Field(ge=1)
    player: Battler
    seed: int
    language: Literal["en", "ja"] = "ja"
    excluded_words: list[str] = Field(default_factory=list)
    """Word targets the player has permanently removed from battles."""
    timestamp: float = Field(default_factory=time.time)


def save_game(data: GameSaveData, path: Path) -> None:
    """Write *data* to *path* as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data.model_dump(mode="json"), indent=2, ensure_ascii=False), encoding="utf-8")


def load_game(path: Path) -> GameSaveData | None:
    """Read a save from *path*.  Returns ``None`` if there is no save."""
    if not path.exists():
        return None
    try:
        return GameSaveData.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        raise SaveError(f"corrupt save file {path}: {e}") from e


def export_save(data: GameSaveData) -> str:
    raw = data.model_dump_json().encode("utf-8")
    return base64.urlsafe_b64encode(zlib.compress(raw)).decode("ascii")


def import_save(text: str) -> GameSaveData:
    """Decode an export string produced by :func:`export_save`."""
    try:
        raw = zlib.decompress(base64.urlsafe_b64decode(text.strip().encode("ascii")))
    except (binascii.Error, zlib.error, UnicodeEncodeError, ValueError) as e:
        raise SaveError(f"not a valid save string: {e}") from e
    try:
        return GameSaveData.model_validate_json(raw)
    except ValidationError as e:
        raise SaveError(f"save string has invalid contents: {e}") from e
