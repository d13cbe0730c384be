"""
手势枚举类型
Gesture Enumeration
"""
from enum import Enum
from typing import Optional
from ...utils.exceptions import InvalidGestureException


class Gesture(Enum):
    """手势类型枚举，声明顺序即克制顺序：每个手势克制下一个"""
    ROCK = "rock"          # 石头
    SCISSORS = "scissors"  # 剪刀
    PAPER = "paper"        # 布
    
    def __str__(self):
        return self.value
    
    def display_name(self) -> str:
        """获取显示名称（Rock, Scissors, Paper）"""
        return to_display_name(self)
    
    @classmethod
    def from_string(cls, value: str) -> Optional["Gesture"]:
        """
        从字符串创建手势枚举
        
        Args:
            value: 手势名称（rock, scissors, paper）或菜单序号（1, 2, 3）
            
        Returns:
            Optional[Gesture]: 手势枚举值，无法识别时返回None
        """
        value_lower = value.strip().lower()
        if value_lower.isdigit():
            index = int(value_lower) - 1
            members = list(cls)
            if 0 <= index < len(members):
                return members[index]
            return None
        for gesture in cls:
            if gesture.value == value_lower:
                return gesture
        return None


_DISPLAY_NAMES = {
    Gesture.ROCK: "Rock",
    Gesture.SCISSORS: "Scissors",
    Gesture.PAPER: "Paper"
}


def to_display_name(gesture: Gesture) -> str:
    """
    获取手势的显示名称
    
    Args:
        gesture: 手势
        
    Returns:
        str: 显示名称
        
    Raises:
        InvalidGestureException: 不是合法的手势值
    """
    if not isinstance(gesture, Gesture):
        raise InvalidGestureException(f"未知的手势值: {gesture!r}", value=gesture)
    return _DISPLAY_NAMES[gesture]
