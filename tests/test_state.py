from replicator.action import ActionEvent, ActionType
from replicator.state import DeltaTime, State, Transition


def test_default_callbacks():
    state = State()
    registry = {}
    assert state.on_start(registry) is Transition.NONE
    assert state.update(registry) is Transition.NONE
    assert state.on_action(registry, ActionEvent(ActionType.ON, "go")) is Transition.NONE
    assert state.on_mouse_move(registry, 1.0, 2.0) is Transition.NONE


def test_default_close_quits():
    assert State().on_close({}) is Transition.QUIT


class _QuitOnAction(State):
    def __init__(self):
        self.seen = []

    def on_action(self, registry, action):
        self.seen.append(action.name)
        return Transition.QUIT if action.name == "quit" else Transition.NONE


def test_subclass_override():
    state = _QuitOnAction()
    assert state.on_action(None, ActionEvent(ActionType.ON, "move")) is Transition.NONE
    assert state.on_action(None, ActionEvent(ActionType.ON, "quit")) is Transition.QUIT
    assert state.seen == ["move", "quit"]
    assert state.update(None) is Transition.NONE


def test_delta_time_holds_value():
    dt = DeltaTime(0.016)
    assert dt.value == 0.016
    assert DeltaTime(0.5) == DeltaTime(0.5)