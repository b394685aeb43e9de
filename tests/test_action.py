import dataclasses

import pytest

from replicator.action import ActionEvent, ActionType


def test_fields_keep_values():
    event = ActionEvent(ActionType.ON, "jump")
    assert event.type is ActionType.ON
    assert event.name == "jump"


def test_equality_by_value():
    assert ActionEvent(ActionType.OFF, "fire") == ActionEvent(ActionType.OFF, "fire")
    assert ActionEvent(ActionType.OFF, "fire") != ActionEvent(ActionType.ON, "fire")


def test_events_are_immutable():
    event = ActionEvent(ActionType.NONE, "idle")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.name = "other"
    assert event.name == "idle"


def test_action_types_are_distinct():
    events = [ActionEvent(kind, "act") for kind in (ActionType.ON, ActionType.OFF, ActionType.NONE)]
    assert [event.type for event in events] == [ActionType.ON, ActionType.OFF, ActionType.NONE]
    assert events[0] != events[1]
    assert events[1] != events[2]
    assert events[0] != events[2]