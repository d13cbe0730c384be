"""
出拳选择
Selection - holds exactly one gesture
"""
import random
from typing import Optional
from .gesture import Gesture
from ...utils.exceptions import InvalidGestureException


class Selection:
    """
    一次出拳，始终持有一个合法手势
    
    可以原地覆盖手势，但不会为空或持有非法值。
    """
    
    __slots__ = ('_gesture',)
    
    def __init__(self, gesture: Gesture = Gesture.ROCK):
        self._gesture = Gesture.ROCK
        self.set_gesture(gesture)
    
    @classmethod
    def generate(cls, rng: Optional[random.Random] = None) -> "Selection":
        """
        随机生成一次出拳
        
        Args:
            rng: 随机数生成器，默认使用模块级生成器
            
        Returns:
            Selection: 均匀随机的出拳
        """
        chooser = rng if rng is not None else random
        return cls(chooser.choice(list(Gesture)))
    
    @property
    def gesture(self) -> Gesture:
        return self._gesture
    
    def set_gesture(self, gesture: Gesture):
        """覆盖当前手势"""
        if not isinstance(gesture, Gesture):
            raise InvalidGestureException(f"非法手势: {gesture!r}", value=gesture)
        self._gesture = gesture
    
    def __eq__(self, other):
        if not isinstance(other, Selection):
            return NotImplemented
        return self._gesture == other._gesture
    
    def __repr__(self):
        return f"Selection({self._gesture.name})"
