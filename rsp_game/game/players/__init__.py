"""
玩家模块
Players Module
"""
from .player_base import PlayerBase
from .human_player import HumanPlayer
from .computer_player import ComputerPlayer

__all__ = ['PlayerBase', 'HumanPlayer', 'ComputerPlayer']
