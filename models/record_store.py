# models/record_store.py

"""
The RecordStore is the "source of truth" for the roster: it owns the ordered list of
`StudentRecord` objects and keeps it mirrored in a key-value persistence backend.

Every mutation is followed by a full write of the list (no incremental writes), so the
in-memory list and the stored payload stay equivalent after each operation.

Loading performs the schema migration: each stored entry has its scores coerced and its
average/status recomputed, and the migrated list is written straight back.

Failures are never raised to the caller. They are logged, reported once through the
Notifier, and described by the returned `Response`.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from core.config import STORAGE_KEY
from core.errors import PersistenceReadError, PersistenceWriteError
from core.notifications import KeyValueStorage, NotificationKind, Notifier
from core.response import ErrorCode, Response
from models.student_record import StudentRecord

logger = logging.getLogger(__name__)


class RecordStore:

    def __init__(
        self,
        storage: KeyValueStorage,
        notifier: Notifier,
        key: str = STORAGE_KEY,
    ):
        self._storage = storage
        self._notifier = notifier
        self._key = key
        self._records: list[StudentRecord] = []

    # === data accessors ===

    def all(self) -> tuple[StudentRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def serialize(self) -> str:
        return json.dumps(
            [record.to_dict() for record in self._records],
            indent=2,
            sort_keys=True,
            ensure_ascii=False,
        )

    # === persistence and import ===

    def load(self) -> Response:
        """
        Replaces the in-memory list with the migrated contents of the backend.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if nothing was stored or every stored entry was migrated.
                    - False if the payload could not be read or parsed.
                - detail (str | None):
                    - A human-readable summary of the result.
                - error (ErrorCode | str | None):
                    - `ErrorCode.READ_FAILED` if the payload is malformed or unreadable.
                - data (dict | None): Payload with the following keys:
                    - "records" (tuple[StudentRecord, ...]): The list now held in memory.
                    - "migrated" (bool): True if the self-healing write was attempted.

        Notes:
            - An absent or blank payload leaves the list empty and performs no write.
            - On a malformed entry, entries migrated before it are kept in memory and no
              write happens, so the stored payload is left for inspection.
            - After a successful migration the list is saved back immediately.
        """
        self._records = []

        try:
            raw = self._storage.get_item(self._key)

            if raw is None or not raw.strip():
                logger.debug("No stored payload under %r", self._key)
                return Response.succeed(
                    detail="No saved records found.",
                    data={"records": self.all(), "migrated": False},
                )

            for record in self._migrate(self._parse(raw)):
                self._records.append(record)

        except PersistenceReadError as e:
            return self._read_failure(e)

        except (OSError, UnicodeDecodeError) as e:
            return self._read_failure(
                PersistenceReadError(f"Failed to read stored records: {e}")
            )

        else:
            logger.info("Loaded %d record(s) from %r", len(self._records), self._key)
            self.save()

            return Response.succeed(
                detail=f"{len(self._records)} record(s) loaded.",
                data={"records": self.all(), "migrated": True},
            )

    def save(self) -> Response:
        """
        Serializes the whole list and writes it to the backend.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the payload was written.
                - detail (str | None): A human-readable summary of the result.
                - error (ErrorCode | str | None):
                    - `ErrorCode.WRITE_FAILED` if serialization or the write failed.

        Notes:
            - On failure the in-memory list is still correct, only not yet durable.
        """
        try:
            try:
                self._storage.set_item(self._key, self.serialize())
            except (OSError, TypeError, ValueError) as e:
                raise PersistenceWriteError(f"Failed to save records: {e}") from e

        except PersistenceWriteError as e:
            logger.error("%s", e, exc_info=e.__cause__)
            self._notifier.notify("Error saving the records.", NotificationKind.ERROR)

            return Response.fail(
                detail=str(e),
                error=ErrorCode.WRITE_FAILED,
            )

        else:
            logger.debug("Saved %d record(s) to %r", len(self._records), self._key)
            return Response.succeed(detail="Records saved.")

    # === data manipulators ===

    def append(self, record: StudentRecord) -> Response:
        """
        Adds a record to the end of the list, then saves.

        Returns:
            Response: The `save()` response, with "record" added to its data on success.
        """
        self._records.append(record)
        logger.info("Appended record for %r at position %d", record.name, len(self) - 1)

        save_response = self.save()

        if not save_response.success:
            return save_response

        return Response.succeed(
            detail=f"{record.name} added to the roster.",
            data={"record": record},
        )

    def remove_at(self, position: int) -> Response:
        """
        Removes exactly one record by position, then saves.

        Args:
            position (int): Zero-based position in the current list.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a record was removed (even if the following save failed).
                    - False if `position` is not a valid position.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if `position` is out of range.
                - status_code (int | None):
                    - 200 on success
                    - 404 if out of range
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): The removed record.
                        - "saved" (bool): Whether the following write succeeded.

        Notes:
            - Out-of-range positions (negative, too large, or not an int) are a silent
              no-op: nothing is notified and nothing is written.
        """
        if not self._is_valid_position(position):
            logger.debug("Ignoring removal at invalid position %r", position)
            return Response.fail(
                detail=f"No record at position {position}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        record = self._records.pop(position)
        logger.info("Removed record for %r at position %d", record.name, position)

        save_response = self.save()

        return Response.succeed(
            detail=f"{record.name} removed from the roster.",
            data={"record": record, "saved": save_response.success},
        )

    # === helper methods ===

    def _is_valid_position(self, position: Any) -> bool:
        if isinstance(position, bool) or not isinstance(position, int):
            return False

        return 0 <= position < len(self._records)

    def _parse(self, raw: str) -> list[Any]:
        try:
            payload = json.loads(raw)
        # JSONDecodeError, over-limit integer literals, and excessive nesting
        except (ValueError, RecursionError) as e:
            raise PersistenceReadError(f"Failed to parse stored records: {e}") from e

        if not isinstance(payload, list):
            raise PersistenceReadError(
                f"Expected a list of records, got {type(payload).__name__}."
            )

        return payload

    def _migrate(self, entries: list[Any]):
        for position, entry in enumerate(entries):
            try:
                yield StudentRecord.from_dict(entry)
            except TypeError as e:
                raise PersistenceReadError(
                    f"Malformed record at position {position}: {e}"
                ) from e

    def _read_failure(self, error: PersistenceReadError) -> Response:
        logger.error("%s", error, exc_info=error.__cause__)
        self._notifier.notify("Error loading saved data.", NotificationKind.ERROR)

        return Response.fail(
            detail=str(error),
            error=ErrorCode.READ_FAILED,
            data={"records": self.all(), "migrated": False},
        )
