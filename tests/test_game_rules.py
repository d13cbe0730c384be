"""
游戏规则测试
Game Rules Tests
"""
import itertools

import pytest

from rsp_game.game import Gesture, GameRules, RoundOutcome, dominates, evaluate, to_display_name
from rsp_game.utils.exceptions import InvalidGestureException

PAIRS = list(itertools.product(Gesture, Gesture))


def test_exactly_three_gestures():
    assert [g.name for g in Gesture] == ["ROCK", "SCISSORS", "PAPER"]


def test_dominance_cycle():
    assert dominates(Gesture.ROCK, Gesture.SCISSORS)
    assert dominates(Gesture.SCISSORS, Gesture.PAPER)
    assert dominates(Gesture.PAPER, Gesture.ROCK)


@pytest.mark.parametrize("a,b", [(a, b) for a, b in PAIRS if a != b])
def test_exactly_one_side_dominates(a, b):
    """不同手势之间恰好一方获胜"""
    assert dominates(a, b) != dominates(b, a)


@pytest.mark.parametrize("gesture", list(Gesture))
def test_each_gesture_beats_one_and_loses_to_one(gesture):
    beaten = [other for other in Gesture if dominates(gesture, other)]
    beaten_by = [other for other in Gesture if dominates(other, gesture)]
    assert len(beaten) == 1
    assert len(beaten_by) == 1
    assert beaten != beaten_by


@pytest.mark.parametrize("gesture", list(Gesture))
def test_same_gesture_is_draw(gesture):
    assert not dominates(gesture, gesture)
    assert evaluate(gesture, gesture) == RoundOutcome.DRAW


@pytest.mark.parametrize("a,b", [(a, b) for a, b in PAIRS if a != b])
def test_evaluate_flips_under_role_swap(a, b):
    """交换双方后结果翻转"""
    assert (evaluate(a, b) == RoundOutcome.FIRST_WINS) == (evaluate(b, a) == RoundOutcome.SECOND_WINS)
    assert evaluate(a, b) != RoundOutcome.DRAW


def test_judge_matches_evaluate():
    for a, b in PAIRS:
        assert GameRules.judge(a, b) == evaluate(a, b)


def test_winning_and_losing_gesture():
    assert GameRules.get_winning_gesture(Gesture.SCISSORS) == Gesture.ROCK
    assert GameRules.get_losing_gesture(Gesture.SCISSORS) == Gesture.PAPER
    for gesture in Gesture:
        assert dominates(GameRules.get_winning_gesture(gesture), gesture)
        assert dominates(gesture, GameRules.get_losing_gesture(gesture))


def test_display_names():
    assert to_display_name(Gesture.ROCK) == "Rock"
    assert to_display_name(Gesture.SCISSORS) == "Scissors"
    assert Gesture.PAPER.display_name() == "Paper"


@pytest.mark.parametrize("value", [3, "rock", None])
def test_display_name_rejects_out_of_range_values(value):
    with pytest.raises(InvalidGestureException) as exc_info:
        to_display_name(value)
    assert exc_info.value.value == value


@pytest.mark.parametrize("text,expected", [
    ("rock", Gesture.ROCK),
    (" Paper ", Gesture.PAPER),
    ("SCISSORS", Gesture.SCISSORS),
    ("1", Gesture.ROCK),
    ("2", Gesture.SCISSORS),
    ("3", Gesture.PAPER),
    ("0", None),
    ("4", None),
    ("lizard", None),
    ("", None),
])
def test_from_string(text, expected):
    assert Gesture.from_string(text) == expected
