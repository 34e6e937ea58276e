"""Read-only question bank.

The bank is a JSON document mapping each subject to a list of question
objects. The service does not own or interpret the questions beyond
picking a random subset of them.
"""

from __future__ import annotations

import json
import logging
import random
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, TypeVar

from prephub.common.errors import NotFoundError, StoreError

logger = logging.getLogger("questions.bank")

T = TypeVar("T")

DEFAULT_SAMPLE_SIZE = 20


def fisher_yates(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Return a uniformly shuffled copy of ``items``."""
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


class QuestionBank:
    """Lazily loads the bank file once and serves copies of its contents."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._data: Optional[Dict[str, List[Any]]] = None
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, List[Any]]:
        if self._data is not None:
            return self._data
        with self._lock:
            if self._data is None:
                try:
                    raw = json.loads(self.path.read_text(encoding="utf-8"))
                except (OSError, ValueError) as exc:
                    logger.error("question_bank_load_failed path=%s error=%s", self.path, exc)
                    raise StoreError(f"Could not read question bank at {self.path}") from exc
                if not isinstance(raw, dict) or not all(isinstance(v, list) for v in raw.values()):
                    raise StoreError(f"Question bank at {self.path} is not a subject -> list mapping")
                self._data = raw
                logger.info("question_bank_loaded path=%s subjects=%d", self.path, len(raw))
        return self._data

    def subjects(self) -> List[str]:
        return list(self._load().keys())

    def questions_for(self, subject: str) -> List[Any]:
        data = self._load()
        if subject not in data:
            raise NotFoundError(f"No questions found for subject: {subject}")
        return list(data[subject])

    def sample(self, subject: str, size: int = DEFAULT_SAMPLE_SIZE, rng: Optional[random.Random] = None) -> List[Any]:
        return fisher_yates(self.questions_for(subject), rng)[: max(0, size)]
