"""
游戏逻辑模块
Game Module
"""
from .game_controller import GameController
from .game_logic import (
    Gesture, GameRules, RoundOutcome, Selection, MatchSession, RoundRecord,
    MatchStatistics, dominates, evaluate, to_display_name
)
from .players import PlayerBase, HumanPlayer, ComputerPlayer
from .state_machine import GameState, GameStateMachine

__all__ = [
    'GameController',
    'Gesture',
    'GameRules',
    'RoundOutcome',
    'Selection',
    'MatchSession',
    'RoundRecord',
    'MatchStatistics',
    'dominates',
    'evaluate',
    'to_display_name',
    'PlayerBase',
    'HumanPlayer',
    'ComputerPlayer',
    'GameState',
    'GameStateMachine'
]
