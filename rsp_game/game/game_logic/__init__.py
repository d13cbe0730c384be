"""
游戏逻辑模块
Game Logic Module
"""
from .gesture import Gesture, to_display_name
from .game_rules import GameRules, RoundOutcome, dominates, evaluate
from .selection import Selection
from .match_session import MatchSession, RoundRecord, MatchStatistics, DRAW

__all__ = [
    'Gesture',
    'to_display_name',
    'GameRules',
    'RoundOutcome',
    'dominates',
    'evaluate',
    'Selection',
    'MatchSession',
    'RoundRecord',
    'MatchStatistics',
    'DRAW'
]
