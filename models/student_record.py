# models/student_record.py

"""
Represents one student's entry in the roster: a name, three scores, and the derived
average and pass/fail status.

Records carry no identifier; their position in the `RecordStore` is the only key.

Includes functionality for:
- Building a record from scores with the derived fields computed by `core.grading`
- Serializing to and from JSON-compatible dictionaries
- Migrating stored entries from older schemas (missing `score3`, Portuguese field names)

Derived fields are never read from storage. `from_dict()` always recomputes them, so a
loaded record is consistent with its scores under the current grading policy.
"""

from __future__ import annotations

from typing import Any

from core import grading
from core.grading import GradeStatus

# current field name -> field name used by the earliest stored schema
LEGACY_FIELD_NAMES = {
    "name": "nome",
    "score1": "nota1",
    "score2": "nota2",
    "score3": "nota3",
    "average": "media",
}

_KNOWN_FIELDS = set(LEGACY_FIELD_NAMES) | set(LEGACY_FIELD_NAMES.values()) | {"status"}


class StudentRecord:

    def __init__(
        self,
        name: str,
        score1: float,
        score2: float,
        score3: float,
        extra: dict[str, Any] | None = None,
    ):
        self._name: str = name
        self._score1: float = float(score1)
        self._score2: float = float(score2)
        self._score3: float = float(score3)
        self._extra: dict[str, Any] = dict(extra or {})

        self._average, self._status = grading.compute(
            self._score1, self._score2, self._score3
        )

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def score1(self) -> float:
        return self._score1

    @property
    def score2(self) -> float:
        return self._score2

    @property
    def score3(self) -> float:
        return self._score3

    @property
    def scores(self) -> tuple[float, float, float]:
        return (self._score1, self._score2, self._score3)

    @property
    def average(self) -> str:
        return self._average

    @property
    def status(self) -> GradeStatus:
        return self._status

    @property
    def extra(self) -> dict[str, Any]:
        return self._extra.copy()

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            **self._extra,
            "name": self._name,
            "score1": self._score1,
            "score2": self._score2,
            "score3": self._score3,
            "average": self._average,
            "status": self._status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> StudentRecord:
        """
        Builds a record from a stored entry, upgrading it to the current schema.

        Args:
            data (dict): A stored entry. May use current or legacy field names and may
                be missing any of the three scores.

        Returns:
            A new `StudentRecord` with scores coerced to floats (missing or unparseable
            scores become 0) and `average`/`status` recomputed.

        Raises:
            TypeError: If `data` is not a dictionary.

        Notes:
            - Stored `average`/`status` values are discarded.
            - Unknown fields are preserved in `extra` and written back by `to_dict()`.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a record object, got {type(data).__name__}.")

        def field(key: str) -> Any:
            if key in data:
                return data[key]
            return data.get(LEGACY_FIELD_NAMES[key])

        name = field("name")
        extra = {k: v for k, v in data.items() if k not in _KNOWN_FIELDS}

        return cls(
            name="" if name is None else str(name),
            score1=grading.coerce_score(field("score1")),
            score2=grading.coerce_score(field("score2")),
            score3=grading.coerce_score(field("score3")),
            extra=extra,
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StudentRecord):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"StudentRecord({self._name!r}, {self._score1}, {self._score2}, {self._score3})"

    def __str__(self) -> str:
        return f"RECORD: {self._name} - average {self._average} ({self._status.value})"
