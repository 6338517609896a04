"""
In-memory record storage.

Each service owns exactly one ``RecordStore``: an ordered list of
plain dictionaries living for the lifetime of the process.  The store
is created by the application factory, attached to ``app.state`` and
handed to request handlers through a FastAPI dependency (see
``api/deps.py``).  Replacing it with a persistent backend only means
providing another object with the same methods.

Identifiers arrive both as JSON numbers and as URL path segments, so
every comparison goes through :func:`canonical_id` which maps both
representations onto one string form.  ``1``, ``1.0``, ``"1"`` and
``"01"`` are therefore the same identifier.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _number_text(number: Union[int, float]) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def canonical_id(value: Any) -> Optional[str]:
    """Return the canonical string form of a record identifier.

    ``None`` stays ``None`` so that records without an id never match
    anything.  Booleans are rendered as ``"true"``/``"false"`` instead of
    being treated as ``1``/``0``.  Numbers and strings holding a finite
    number share one form, so ``1``, ``1.0``, ``"01"`` and ``"1.0"`` are
    all ``"1"``.  Any other string is only stripped of whitespace.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _number_text(value) if math.isfinite(value) else str(value)
    text = str(value).strip()
    # float() also accepts "1_000", "nan" and "inf"; those stay plain strings.
    if not text or "_" in text:
        return text
    try:
        return str(int(text))
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return text
    return _number_text(number) if math.isfinite(number) else text


class RecordStore:
    """Ordered, process-local collection of records."""

    def __init__(self, name: str = "records") -> None:
        self.name = name
        self._records: List[Record] = []

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> List[Record]:
        """Return a shallow copy of all records in insertion order."""
        return list(self._records)

    def append(self, record: Record) -> Record:
        self._records.append(record)
        logger.debug("Stored record %r in %s (size=%d)", record.get("id"), self.name, len(self._records))
        return record

    def find(self, record_id: Any) -> Optional[Record]:
        """Return the first record whose id matches ``record_id``."""
        wanted = canonical_id(record_id)
        if wanted is None:
            return None
        for record in self._records:
            if canonical_id(record.get("id")) == wanted:
                return record
        return None

    def remove(self, record_id: Any) -> int:
        """Remove every record whose id matches ``record_id``.

        Returns the number of removed records; zero is not an error.
        """
        wanted = canonical_id(record_id)
        kept = [r for r in self._records if wanted is None or canonical_id(r.get("id")) != wanted]
        removed = len(self._records) - len(kept)
        self._records = kept
        if removed:
            logger.debug("Removed %d record(s) with id %r from %s", removed, record_id, self.name)
        return removed
