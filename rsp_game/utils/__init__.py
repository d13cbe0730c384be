"""
工具类模块
Utility Classes
"""
from .logger import setup_logger, get_log_level, apply_log_level
from .config_loader import ConfigLoader, GameSettings, DEFAULT_ROUNDS
from .error_handler import ErrorHandler, global_error_handler
from .exceptions import (
    GameException,
    MatchOverException,
    NoActiveMatchException,
    InvalidGestureException,
    ConfigurationException
)

__all__ = [
    'setup_logger',
    'get_log_level',
    'apply_log_level',
    'ConfigLoader',
    'GameSettings',
    'DEFAULT_ROUNDS',
    'ErrorHandler',
    'global_error_handler',
    'GameException',
    'MatchOverException',
    'NoActiveMatchException',
    'InvalidGestureException',
    'ConfigurationException'
]
