from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from graph_tutor.errors import ValidationError

from .models import Word


def batched(it: Iterable, batch_size: int) -> Iterable[list]:
    batch: list = []
    for x in it:
        batch.append(x)
        if len(batch) >= batch_size:
            yield batch
            batch = []
    if batch:
        yield batch


def word_from_dict(d: dict[str, Any]) -> Word:
    text = d.get("text")
    if not isinstance(text, str) or not text.strip():
        raise ValidationError(f"word entry without text: {d!r}")
    return Word(
        text=text,
        gender=d.get("gender"),
        pos=d.get("pos"),
        difficulty=d.get("difficulty"),
        frequency=d.get("frequency"),
    )


def load_words(path: str | Path) -> list[Word]:
    """Read Word reference data from a JSON array or a JSON-lines file."""

    raw = Path(path).read_text(encoding="utf-8").strip()
    if not raw:
        return []

    if raw.startswith("["):
        items = json.loads(raw)
    else:
        items = [json.loads(line) for line in raw.splitlines() if line.strip()]

    return [word_from_dict(d) for d in items]
