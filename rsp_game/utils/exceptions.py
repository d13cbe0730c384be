"""
自定义异常类
Custom Exception Classes
"""
from typing import Any, Optional


class GameException(Exception):
    """游戏逻辑异常"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state
        self.message = message


class MatchOverException(GameException):
    """所有回合已完成后仍尝试进行回合"""
    def __init__(self, message: str, rounds_played: Optional[int] = None):
        super().__init__(message, game_state="finished")
        self.rounds_played = rounds_played


class NoActiveMatchException(GameException):
    """没有进行中的比赛"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message, game_state=game_state)


class InvalidGestureException(GameException):
    """手势值不在三种手势范围内"""
    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class ConfigurationException(Exception):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
        self.message = message
