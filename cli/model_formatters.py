# cli/model_formatters.py

# anything that renders StudentRecord objects for the terminal
from textwrap import dedent

import core.formatters as formatters
from models.student_record import StudentRecord

# === record formatters ===


def format_table_header() -> str:
    header = (
        f"{'#':>3}  {'Name':<24} | {'Score 1':>7} | {'Score 2':>7} | {'Score 3':>7}"
        f" | {'Average':>7} | Status"
    )
    return f"{header}\n{'-' * len(header)}"


def format_record_row(record: StudentRecord, row_number: int) -> str:
    scores = " | ".join(f"{formatters.format_score(s):>7}" for s in record.scores)

    return (
        f"{row_number:>3}. {record.name:<24} | {scores}"
        f" | {record.average:>7} | {record.status.value}"
    )


def format_record_multiline(record: StudentRecord) -> str:
    scores = ", ".join(formatters.format_score(s) for s in record.scores)

    return dedent(
        f"""\
        Student record:
        ... Name: {record.name}
        ... Scores: {scores}
        ... Average: {record.average}
        ... Status: {record.status.value}"""
    )
