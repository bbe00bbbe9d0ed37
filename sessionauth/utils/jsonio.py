from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .fs import write_json_atomic


class JsonShapeError(ValueError):
    pass


def read_json_list_of_dicts(path: str | Path) -> list[dict[str, Any]]:
    """Read a JSON array of objects; a missing file reads as an empty list.

    Raises ``JsonShapeError`` when the file is not a JSON array of objects.
    """
    try:
        with open(path, encoding="utf-8") as f:
            loaded = json.load(f)
    except FileNotFoundError:
        return []
    except json.JSONDecodeError as exc:
        raise JsonShapeError(f"{path}: {exc}") from exc
    if not isinstance(loaded, list):
        raise JsonShapeError(f"{path}: expected a JSON array")
    if not all(isinstance(x, dict) for x in loaded):
        raise JsonShapeError(f"{path}: expected an array of objects")
    return loaded


def write_json_list(path: str | Path, data: list[dict[str, Any]]) -> None:
    write_json_atomic(path, data)
