# cli/renderer.py

"""
Terminal implementation of the View renderer collaborator.

Every call to `render_all()` replaces the whole display and rebuilds the delete actions,
one per row, bound to the record's current position and name.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple, TextIO

import cli.model_formatters as model_formatters
import core.formatters as formatters
from models.student_record import StudentRecord


class DeleteAction(NamedTuple):
    position: int
    name: str


class TableRenderer:

    def __init__(self, stream: TextIO | None = None, title: str = "Student Records"):
        self._stream = stream
        self._title = title
        self._actions: list[DeleteAction] = []

    @property
    def actions(self) -> list[DeleteAction]:
        return list(self._actions)

    def action_for_row(self, row_number: int) -> DeleteAction | None:
        """Returns the delete action for a 1-based row number, or None if there is no such row."""
        if 1 <= row_number <= len(self._actions):
            return self._actions[row_number - 1]
        return None

    def render_all(self, records: Sequence[StudentRecord]) -> None:
        self._actions = [
            DeleteAction(position, record.name) for position, record in enumerate(records)
        ]

        lines = [f"\n{formatters.format_banner_text(self._title, width=72)}"]

        if not records:
            lines.append("There are no records yet.")
        else:
            lines.append(model_formatters.format_table_header())
            lines.extend(
                model_formatters.format_record_row(record, row_number)
                for row_number, record in enumerate(records, 1)
            )

        print("\n".join(lines), file=self._stream)
