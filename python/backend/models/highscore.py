"""Results table persistence, one ranking per difficulty."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from backend.models.settings import Difficulty, to_difficulty

logger = logging.getLogger(__name__)


@dataclass
class HighScoreEntry:
    slides: int
    time: float
    date: str


class HighScoreManager:
    """Loads, saves, and queries finished games from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._scores: dict[str, list[HighScoreEntry]] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if self.filepath.exists():
            data = json.loads(self.filepath.read_text())
            for key, entries in data.items():
                self._scores[key] = [HighScoreEntry(**e) for e in entries]
            logger.debug("Loaded results for %d difficulties", len(self._scores))

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {
            key: [asdict(e) for e in entries]
            for key, entries in self._scores.items()
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- queries --------------------------------------------------------------

    def add_score(self, difficulty: Difficulty | str, entry: HighScoreEntry) -> None:
        key = to_difficulty(difficulty).value
        entries = self._scores.setdefault(key, [])
        entries.append(entry)
        entries.sort(key=lambda e: (e.slides, e.time))
        self.save()

    def get_scores(self, difficulty: Difficulty | str) -> list[HighScoreEntry]:
        return list(self._scores.get(to_difficulty(difficulty).value, []))

    def get_all_difficulties(self) -> list[Difficulty]:
        return [d for d in Difficulty if self._scores.get(d.value)]
