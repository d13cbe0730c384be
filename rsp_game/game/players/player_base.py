"""
玩家抽象基类
Player Base Class
"""
from abc import ABC, abstractmethod
from ..game_logic.selection import Selection


class PlayerBase(ABC):
    """玩家抽象基类，定义出拳来源必须实现的接口"""
    
    def __init__(self, name: str):
        self._name = name
    
    @property
    def name(self) -> str:
        """玩家显示名称"""
        return self._name
    
    @abstractmethod
    def choose_selection(self) -> Selection:
        """
        为当前回合出拳
        
        Returns:
            Selection: 本回合的出拳
        """
        pass
    
    def __repr__(self):
        return f"{type(self).__name__}(name={self._name!r})"
