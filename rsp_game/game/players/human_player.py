"""
人类玩家
Human Player - gesture supplied by an injected input callback
"""
from typing import Callable, Union
from .player_base import PlayerBase
from ..game_logic.gesture import Gesture
from ..game_logic.selection import Selection
from ...utils.exceptions import InvalidGestureException
from ...utils.logger import setup_logger

logger = setup_logger("RSP.HumanPlayer")

InputCallback = Callable[[], Union[Gesture, Selection]]


class HumanPlayer(PlayerBase):
    """人类玩家，出拳由外部输入回调提供（控制台、界面等）"""
    
    def __init__(self, name: str, input_callback: InputCallback):
        """
        初始化人类玩家
        
        Args:
            name: 玩家名称
            input_callback: 无参回调，返回已校验的手势
        """
        super().__init__(name)
        self._input_callback = input_callback
    
    def choose_selection(self) -> Selection:
        choice = self._input_callback()
        if isinstance(choice, Selection):
            return choice
        if isinstance(choice, Gesture):
            return Selection(choice)
        logger.warning(f"输入回调返回了非法手势: {choice!r}")
        raise InvalidGestureException(f"输入回调返回了非法手势: {choice!r}", value=choice)
