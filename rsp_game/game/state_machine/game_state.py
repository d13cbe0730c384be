"""
游戏状态枚举
Game State Enumeration
"""
from enum import Enum, auto


class GameState(Enum):
    """游戏生命周期状态枚举"""
    IDLE = auto()       # 尚未开始任何比赛
    RUNNING = auto()    # 比赛进行中
    FINISHED = auto()   # 比赛结束，结果可用
    
    def __str__(self):
        return self.name
