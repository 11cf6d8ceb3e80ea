# tests/test_controller.py

import pytest
from conftest import FailingStorage, stored_payload

from core.controller import RosterController
from core.errors import ValidationError, ValidationReason
from core.grading import GradeStatus
from core.notifications import NotificationKind
from models.record_store import RecordStore

# === submit ===


def test_submit_passing_student(controller, store, notifier, renderer, storage):
    response = controller.submit("Ana", "7", "8", "9")

    assert response.success
    record = response.data["record"]
    assert record.to_dict() == {
        "name": "Ana",
        "score1": 7.0,
        "score2": 8.0,
        "score3": 9.0,
        "average": "8.0",
        "status": "Passed",
    }
    assert store.all() == (record,)
    assert stored_payload(storage)[0]["name"] == "Ana"
    assert renderer.last == (record,)

    message, kind = notifier.messages[-1]
    assert kind is NotificationKind.SUCCESS
    assert "Ana" in message


def test_submit_failing_student(controller):
    record = controller.submit("Bruno", "4", "5", "3").data["record"]

    assert record.average == "4.0"
    assert record.status is GradeStatus.FAILED


def test_submit_trims_name(controller):
    record = controller.submit("  Ana  ", "7", "8", "9").data["record"]

    assert record.name == "Ana"


@pytest.mark.parametrize(
    "fields, reason",
    [
        (("", "5", "5", "5"), ValidationReason.MISSING_FIELD),
        (("   ", "5", "5", "5"), ValidationReason.MISSING_FIELD),
        (("Carla", "5", "", "5"), ValidationReason.MISSING_FIELD),
        ((None, "5", "5", "5"), ValidationReason.MISSING_FIELD),
        (("Carla", "5", "5", None), ValidationReason.MISSING_FIELD),
        (("Carla", "abc", "5", "5"), ValidationReason.NOT_A_NUMBER),
        (("Carla", "  ", "5", "5"), ValidationReason.NOT_A_NUMBER),
        (("Carla", "5", "5", "nan"), ValidationReason.NOT_A_NUMBER),
        (("Carla", "11", "5", "5"), ValidationReason.OUT_OF_RANGE),
        (("Carla", "5", "-0.5", "5"), ValidationReason.OUT_OF_RANGE),
        (("Carla", "5", "5", "inf"), ValidationReason.OUT_OF_RANGE),
    ],
)
def test_submit_rejects_invalid_input(controller, store, storage, notifier, renderer, fields, reason):
    response = controller.submit(*fields)

    assert not response.success
    assert response.error is reason
    assert store.all() == ()
    assert storage.writes == 0
    assert renderer.renders == []

    message, kind = notifier.messages[-1]
    assert kind is NotificationKind.ERROR
    assert message == response.detail


def test_submit_missing_field_takes_precedence(controller):
    response = controller.submit("", "abc", "11", "5")

    assert response.error is ValidationReason.MISSING_FIELD


def test_submit_not_a_number_takes_precedence_over_range(controller):
    response = controller.submit("Carla", "11", "abc", "5")

    assert response.error is ValidationReason.NOT_A_NUMBER


def test_submit_accepts_bounds(controller):
    assert controller.submit("Davi", "0", "10", "10.0").success


def test_submit_out_of_range_keeps_existing_records(populated_store, notifier, renderer, storage):
    controller = RosterController(populated_store, notifier, renderer)
    before = populated_store.all()
    writes_before = storage.writes

    response = controller.submit("Carla", "11", "5", "5")

    assert response.error is ValidationReason.OUT_OF_RANGE
    assert populated_store.all() == before
    assert storage.writes == writes_before


def test_submit_with_failed_write_keeps_record_in_memory(notifier, renderer):
    store = RecordStore(FailingStorage(), notifier)
    controller = RosterController(store, notifier, renderer)

    response = controller.submit("Ana", "7", "8", "9")

    assert response.success
    assert not response.data["saved"]
    assert len(store) == 1
    assert notifier.kinds() == [NotificationKind.ERROR, NotificationKind.SUCCESS]


def test_validate_missing_fields_are_listed():
    with pytest.raises(ValidationError) as excinfo:
        RosterController.validate("", "5", "", "5")

    assert excinfo.value.reason is ValidationReason.MISSING_FIELD
    assert "name and score 2" in excinfo.value.detail


def test_validate_returns_parsed_values():
    name, scores = RosterController.validate(" Ana ", "7", " 8.5", "9 ")

    assert name == "Ana"
    assert scores == (7.0, 8.5, 9.0)


# === delete_record ===


def test_delete_record_shifts_following_record(populated_store, notifier, renderer):
    controller = RosterController(populated_store, notifier, renderer)

    response = controller.delete_record(0, "Ana")

    assert response.success
    assert [r.name for r in populated_store.all()] == ["Bruno"]
    assert [r.name for r in renderer.last] == ["Bruno"]

    message, kind = notifier.messages[-1]
    assert kind is NotificationKind.INFO
    assert "Ana" in message


def test_delete_record_out_of_range_is_silent(populated_store, notifier, renderer, storage):
    controller = RosterController(populated_store, notifier, renderer)
    writes_before = storage.writes

    response = controller.delete_record(5, "Nobody")

    assert not response.success
    assert len(populated_store) == 2
    assert renderer.renders == []
    assert notifier.messages == []
    assert storage.writes == writes_before


def test_refresh_renders_current_list(populated_store, notifier, renderer):
    controller = RosterController(populated_store, notifier, renderer)

    controller.refresh()

    assert renderer.last == populated_store.all()
