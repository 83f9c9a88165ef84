"""I/O helpers: orjson-backed JSON/JSONL and numeric sample files."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def dumps_json(obj: Any, *, pretty: bool = True) -> bytes:
    """Serialize ``obj`` to JSON bytes with sorted keys."""
    opts = orjson.OPT_SORT_KEYS
    if pretty:
        opts |= orjson.OPT_INDENT_2
    return orjson.dumps(obj, option=opts)


def load_json(path: Path) -> Any:
    return orjson.loads(path.read_bytes())


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(dumps_json(obj, pretty=pretty))


def load_jsonl(path: Path) -> list[dict[str, Any]]:
    """Load a JSON Lines file (one JSON object per line). Blank lines skipped."""
    records: list[dict[str, Any]] = []
    for line in path.read_bytes().split(b"\n"):
        line = line.strip()
        if line:
            records.append(orjson.loads(line))
    return records


def save_jsonl(records: list[dict[str, Any]], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [orjson.dumps(r, option=orjson.OPT_SORT_KEYS) for r in records]
    path.write_bytes(b"\n".join(lines) + b"\n")


def _sample_from_item(item: Any, *, where: str) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, dict) and isinstance(item.get("value"), str):
        return item["value"]
    raise ValueError(f"{where}: expected a string or an object with a string 'value'")


def read_samples(path: Path) -> list[str]:
    """Read numeric sample strings from a .json, .jsonl, or text file.

    JSON files hold a list of strings (or of {"value": "..."} objects);
    JSONL files hold one {"value": "..."} object per line; anything else
    is read as one sample per non-blank line.
    """
    suffix = path.suffix.lower()
    if suffix == ".json":
        data = load_json(path)
        if not isinstance(data, list):
            raise ValueError(f"{path}: expected a JSON list of samples")
        return [
            _sample_from_item(item, where=f"{path}[{i}]")
            for i, item in enumerate(data)
        ]
    if suffix == ".jsonl":
        return [
            _sample_from_item(rec, where=f"{path} record {i}")
            for i, rec in enumerate(load_jsonl(path))
        ]
    text = path.read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]
