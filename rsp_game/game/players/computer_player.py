"""
电脑玩家
Computer Player - uniformly random gestures
"""
import random
from typing import Optional
from .player_base import PlayerBase
from ..game_logic.selection import Selection
from ...utils.logger import setup_logger

logger = setup_logger("RSP.ComputerPlayer")


class ComputerPlayer(PlayerBase):
    """电脑玩家，每回合均匀随机出拳"""
    
    def __init__(self, name: str = "Computer", seed: Optional[int] = None):
        """
        初始化电脑玩家
        
        Args:
            name: 显示名称
            seed: 随机种子（可选），每个实例使用独立的随机数生成器
        """
        super().__init__(name)
        self._rng = random.Random(seed)
    
    def choose_selection(self) -> Selection:
        selection = Selection.generate(self._rng)
        logger.debug(f"{self.name} 出拳: {selection.gesture}")
        return selection
