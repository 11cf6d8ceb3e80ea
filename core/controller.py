# core/controller.py

"""
RosterController mediates between raw user input and the `RecordStore`.

Each operation is one atomic transition: validate -> compute -> mutate -> persist ->
render -> notify. Validation failures are raised as `ValidationError` internally and
converted into an error notification and a failed `Response` before returning, so the
caller never sees an exception and the roster is never partially updated.
"""

from __future__ import annotations

import logging
import math

import core.formatters as formatters
from core import grading
from core.config import MAX_SCORE, MIN_SCORE
from core.errors import ValidationError, ValidationReason
from core.notifications import NotificationKind, Notifier, Renderer
from core.response import Response
from models.record_store import RecordStore
from models.student_record import StudentRecord

logger = logging.getLogger(__name__)

SCORE_LABELS = ("score 1", "score 2", "score 3")


class RosterController:

    def __init__(self, store: RecordStore, notifier: Notifier, renderer: Renderer):
        self._store = store
        self._notifier = notifier
        self._renderer = renderer

    @property
    def store(self) -> RecordStore:
        return self._store

    def refresh(self) -> None:
        self._renderer.render_all(self._store.all())

    # === operations ===

    def submit(
        self,
        raw_name: str | None,
        raw_score1: str | None,
        raw_score2: str | None,
        raw_score3: str | None,
    ) -> Response:
        """
        Validates a new entry and adds it to the roster.

        Args:
            raw_name (str | None): The student's name as entered.
            raw_score1, raw_score2, raw_score3 (str | None): The scores as entered.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was built and appended.
                    - False if validation failed.
                - detail (str | None):
                    - On failure, the human-readable reason also shown to the user.
                - error (ErrorCode | str | None):
                    - `ValidationReason.MISSING_FIELD` if the name is blank or any score is empty.
                    - `ValidationReason.NOT_A_NUMBER` if any score is not numeric.
                    - `ValidationReason.OUT_OF_RANGE` if any score is outside the bounds.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): The new record.
                        - "saved" (bool): Whether the following write succeeded.

        Notes:
            - On failure nothing is appended and nothing is written.
            - A failed write after a valid entry is reported by the store; the record
              remains in memory and the entry still counts as submitted.
        """
        try:
            name, scores = self.validate(raw_name, raw_score1, raw_score2, raw_score3)

        except ValidationError as e:
            logger.info("Rejected entry: %s", e.reason.value)
            self._notifier.notify(e.detail, NotificationKind.ERROR)

            return Response.fail(detail=e.detail, error=e.reason)

        record = StudentRecord(name, *scores)
        append_response = self._store.append(record)

        self.refresh()
        self._notifier.notify(
            f"Student {name} registered successfully!", NotificationKind.SUCCESS
        )

        return Response.succeed(
            detail=f"{name} added to the roster.",
            data={"record": record, "saved": append_response.success},
        )

    def delete_record(self, position: int, display_name: str) -> Response:
        """
        Removes the record at `position` and reports it under `display_name`.

        Returns:
            Response: The `RecordStore.remove_at()` response.

        Notes:
            - An out-of-range position is a silent no-op: no render, no notification.
        """
        remove_response = self._store.remove_at(position)

        if not remove_response.success:
            return remove_response

        self.refresh()
        self._notifier.notify(
            f"Student {display_name} removed successfully.", NotificationKind.INFO
        )

        return remove_response

    # === data validators ===

    @staticmethod
    def validate(
        raw_name: str | None,
        raw_score1: str | None,
        raw_score2: str | None,
        raw_score3: str | None,
    ) -> tuple[str, tuple[float, float, float]]:
        """
        Normalizes and validates raw form input.

        Checks run in order and the first failure is raised:
            1. name is non-blank after trimming and all three scores are non-empty
            2. every score parses as a number (whitespace-only text does not)
            3. every score is within [MIN_SCORE, MAX_SCORE]

        Returns:
            The trimmed name and the three parsed scores.

        Raises:
            ValidationError: With the reason of the first failed check.
        """
        name = (raw_name or "").strip()
        raw_scores = [raw or "" for raw in (raw_score1, raw_score2, raw_score3)]

        missing = ["name"] if not name else []
        missing += [label for label, raw in zip(SCORE_LABELS, raw_scores) if not raw]

        if missing:
            raise ValidationError(
                ValidationReason.MISSING_FIELD,
                f"Please fill in every field (missing {formatters.format_list_with_and(missing)}).",
            )

        scores = tuple(grading.parse_score(raw) for raw in raw_scores)

        if any(math.isnan(score) for score in scores):
            raise ValidationError(
                ValidationReason.NOT_A_NUMBER,
                "Scores must be numbers.",
            )

        if any(not MIN_SCORE <= score <= MAX_SCORE for score in scores):
            raise ValidationError(
                ValidationReason.OUT_OF_RANGE,
                f"Scores must be values between {formatters.format_bounds(MIN_SCORE, MAX_SCORE)}.",
            )

        return name, scores
