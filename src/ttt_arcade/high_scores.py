"""
High-score persistence: a JSON file holding ``{"scores": [{"name", "score"}]}``.

A missing or unreadable file is treated as an empty table and rewritten;
bad entries inside an otherwise readable file are skipped.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List

from .paths import ensure_parent, high_scores_file

NAME_LENGTH = 3
MIN_COLUMN_WIDTH = 10


@dataclass(frozen=True)
class ScoreRecord:
    name: str
    score: int

    @classmethod
    def from_json(cls, obj: Dict[str, Any]) -> "ScoreRecord":
        return cls(name=str(obj["name"]), score=int(obj["score"]))


def sort_records(records: List[ScoreRecord]) -> List[ScoreRecord]:
    """Highest score first; equal scores ordered by name."""
    return sorted(records, key=lambda r: (-r.score, r.name))


class HighScoreStore:
    def __init__(self, path: Path | None = None):
        self.path = high_scores_file(path)

    def _write(self, records: List[ScoreRecord]) -> None:
        ensure_parent(self.path)
        payload = {"scores": [asdict(r) for r in records]}
        self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")

    def _reset(self, reason: Exception) -> List[ScoreRecord]:
        logging.warning("High-score file %s unusable (%s); starting empty", self.path, reason)
        try:
            self._write([])
        except OSError as exc:
            logging.warning("Could not recreate high-score file %s (%s)", self.path, exc)
        return []

    def load(self) -> List[ScoreRecord]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            entries = list(data["scores"])
        except (OSError, ValueError, KeyError, TypeError) as exc:
            return self._reset(exc)

        records: List[ScoreRecord] = []
        for obj in entries:
            try:
                records.append(ScoreRecord.from_json(obj))
            except (ValueError, KeyError, TypeError) as exc:
                logging.warning("Skipping bad high-score entry %r (%s)", obj, exc)
        return records

    def append(self, record: ScoreRecord) -> bool:
        """Save ``record``. Returns False, after logging, when the file cannot be written."""
        records = self.load()
        records.append(record)
        try:
            self._write(records)
        except OSError as exc:
            logging.error("Could not save score to %s (%s)", self.path, exc)
            return False
        logging.debug("saved score name=%s score=%d to %s", record.name, record.score, self.path)
        return True

    def sorted_records(self) -> List[ScoreRecord]:
        return sort_records(self.load())


def format_table(records: List[ScoreRecord], header=lambda text: text) -> str:
    """Two-column SCORE/NAME listing; ``header`` decorates the column titles."""
    score_w = max([MIN_COLUMN_WIDTH] + [len(str(r.score)) for r in records])
    name_w = max([MIN_COLUMN_WIDTH] + [len(r.name) for r in records])
    lines = [
        header("SCORE".ljust(score_w)) + " " + header("NAME".ljust(name_w))
    ]
    for r in records:
        lines.append(str(r.score).ljust(score_w) + " " + r.name.ljust(name_w))
    return "\n".join(line.rstrip() for line in lines)
