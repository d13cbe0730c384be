"""
测试公共夹具
Shared Test Fixtures
"""
import itertools

import pytest

from rsp_game.game import Gesture, HumanPlayer


def fixed_player(name: str, gesture: Gesture) -> HumanPlayer:
    """每回合都出同一个手势的玩家"""
    return HumanPlayer(name, lambda: gesture)


def scripted_player(name: str, gestures) -> HumanPlayer:
    """按顺序循环出拳的玩家"""
    cycle = itertools.cycle(gestures)
    return HumanPlayer(name, lambda: next(cycle))


@pytest.fixture
def rock_player():
    return fixed_player("Alice", Gesture.ROCK)


@pytest.fixture
def scissors_player():
    return fixed_player("Computer", Gesture.SCISSORS)
