"""
游戏规则实现
Game Rules Implementation
"""
from typing import Dict
from enum import Enum
from .gesture import Gesture
from ...utils.logger import setup_logger

logger = setup_logger("RSP.GameRules")


class RoundOutcome(Enum):
    """回合结果枚举"""
    FIRST_WINS = "first_wins"      # 先手方（玩家）获胜
    SECOND_WINS = "second_wins"    # 后手方（电脑）获胜
    DRAW = "draw"                  # 平局


class GameRules:
    """游戏规则类"""
    
    # 胜负规则：key胜value
    WIN_RULES: Dict[Gesture, Gesture] = {
        Gesture.ROCK: Gesture.SCISSORS,      # 石头胜剪刀
        Gesture.SCISSORS: Gesture.PAPER,     # 剪刀胜布
        Gesture.PAPER: Gesture.ROCK          # 布胜石头
    }
    
    @staticmethod
    def dominates(first: Gesture, second: Gesture) -> bool:
        """
        判断first是否克制second
        
        Args:
            first: 进攻手势
            second: 防守手势
            
        Returns:
            bool: first胜second时为True
        """
        return GameRules.WIN_RULES.get(first) == second
    
    @staticmethod
    def judge(first: Gesture, second: Gesture) -> RoundOutcome:
        """
        判断回合结果
        
        Args:
            first: 先手方手势
            second: 后手方手势
            
        Returns:
            RoundOutcome: 回合结果
        """
        if first == second:
            logger.debug(f"平局: {first}")
            return RoundOutcome.DRAW
        
        if GameRules.dominates(first, second):
            logger.debug(f"先手方获胜: {first} 胜 {second}")
            return RoundOutcome.FIRST_WINS
        
        logger.debug(f"后手方获胜: {second} 胜 {first}")
        return RoundOutcome.SECOND_WINS
    
    @staticmethod
    def get_winning_gesture(gesture: Gesture) -> Gesture:
        """
        获取能战胜指定手势的手势
        
        Args:
            gesture: 目标手势
            
        Returns:
            Gesture: 能战胜目标的手势
        """
        for winner, loser in GameRules.WIN_RULES.items():
            if loser == gesture:
                return winner
        raise KeyError(gesture)
    
    @staticmethod
    def get_losing_gesture(gesture: Gesture) -> Gesture:
        """
        获取会被指定手势战胜的手势
        
        Args:
            gesture: 目标手势
            
        Returns:
            Gesture: 会被目标战胜的手势
        """
        return GameRules.WIN_RULES[gesture]


def dominates(first: Gesture, second: Gesture) -> bool:
    """first克制second时返回True"""
    return GameRules.dominates(first, second)


def evaluate(first: Gesture, second: Gesture) -> RoundOutcome:
    """计算两个手势的回合结果"""
    return GameRules.judge(first, second)
