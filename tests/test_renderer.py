# tests/test_renderer.py

import io

from cli.renderer import DeleteAction, TableRenderer


def test_render_empty_roster():
    stream = io.StringIO()
    renderer = TableRenderer(stream=stream)

    renderer.render_all([])

    assert "There are no records yet." in stream.getvalue()
    assert renderer.actions == []


def test_render_rows_and_actions(sample_record, sample_failing_record):
    stream = io.StringIO()
    renderer = TableRenderer(stream=stream)

    renderer.render_all([sample_record, sample_failing_record])
    output = stream.getvalue()

    assert "Student Records" in output
    assert "Average" in output
    assert "  1. Ana" in output
    assert "  2. Bruno" in output
    assert "8.0 | Passed" in output
    assert "4.0 | Failed" in output

    assert renderer.actions == [DeleteAction(0, "Ana"), DeleteAction(1, "Bruno")]


def test_render_replaces_previous_actions(sample_record, sample_failing_record):
    renderer = TableRenderer(stream=io.StringIO())

    renderer.render_all([sample_record, sample_failing_record])
    renderer.render_all([sample_failing_record])

    assert renderer.actions == [DeleteAction(0, "Bruno")]


def test_action_for_row(sample_record):
    renderer = TableRenderer(stream=io.StringIO())
    renderer.render_all([sample_record])

    assert renderer.action_for_row(1) == DeleteAction(0, "Ana")
    assert renderer.action_for_row(0) is None
    assert renderer.action_for_row(2) is None
