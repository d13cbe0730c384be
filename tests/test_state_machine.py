"""
状态机测试
State Machine Tests
"""
from rsp_game.game import GameState, GameStateMachine


def test_valid_transitions():
    machine = GameStateMachine()
    assert machine.get_current_state() == GameState.IDLE
    assert machine.transition_to(GameState.RUNNING)
    assert machine.transition_to(GameState.RUNNING)
    assert machine.transition_to(GameState.FINISHED)
    assert machine.transition_to(GameState.RUNNING)


def test_invalid_transitions_are_rejected():
    machine = GameStateMachine()
    assert not machine.can_transition_to(GameState.FINISHED)
    assert not machine.transition_to(GameState.FINISHED)
    assert machine.get_current_state() == GameState.IDLE

    machine.transition_to(GameState.RUNNING)
    assert machine.can_transition_to(GameState.FINISHED)
    assert not machine.transition_to(GameState.IDLE)


def test_handlers_run_on_state_change_only():
    calls = []
    machine = GameStateMachine()
    machine.register_state_handler(GameState.RUNNING, lambda: calls.append("running"))
    machine.register_state_handler(GameState.FINISHED, lambda: calls.append("finished"))

    machine.transition_to(GameState.RUNNING)
    machine.transition_to(GameState.RUNNING)
    machine.transition_to(GameState.FINISHED)

    assert calls == ["running", "finished"]


def test_failing_handler_still_transitions():
    machine = GameStateMachine()

    def broken():
        raise RuntimeError("boom")

    machine.register_state_handler(GameState.RUNNING, broken)
    assert machine.transition_to(GameState.RUNNING)
    assert machine.get_current_state() == GameState.RUNNING
