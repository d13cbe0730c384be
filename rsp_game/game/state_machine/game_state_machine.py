"""
游戏状态机
Game State Machine
"""
from typing import Callable, Dict, List
from .game_state import GameState
from ...utils.logger import setup_logger

logger = setup_logger("RSP.GameStateMachine")


class GameStateMachine:
    """游戏状态机类"""

    # 状态转换规则；RUNNING -> RUNNING 对应未结束的回合或重新开局
    VALID_TRANSITIONS: Dict[GameState, List[GameState]] = {
        GameState.IDLE: [GameState.RUNNING],
        GameState.RUNNING: [GameState.RUNNING, GameState.FINISHED],
        GameState.FINISHED: [GameState.RUNNING]
    }

    def __init__(self, initial_state: GameState = GameState.IDLE):
        """
        初始化状态机

        Args:
            initial_state: 初始状态
        """
        self.current_state = initial_state
        self.state_handlers: Dict[GameState, Callable] = {}

        logger.debug(f"游戏状态机初始化，初始状态: {self.current_state}")

    def register_state_handler(self, state: GameState, handler: Callable):
        """
        注册状态处理函数

        Args:
            state: 状态
            handler: 进入该状态时调用的无参函数
        """
        self.state_handlers[state] = handler
        logger.debug(f"注册状态处理函数: {state}")

    def transition_to(self, new_state: GameState) -> bool:
        """
        转换到新状态

        Args:
            new_state: 新状态

        Returns:
            bool: 转换是否成功
        """
        if not self.can_transition_to(new_state):
            logger.warning(f"无效的状态转换: {self.current_state} -> {new_state}")
            return False

        # 状态相同时不触发处理函数
        if self.current_state == new_state:
            logger.debug(f"状态未改变: {self.current_state}")
            return True

        old_state = self.current_state
        self.current_state = new_state

        logger.info(f"状态转换: {old_state} -> {new_state}")

        if new_state in self.state_handlers:
            try:
                self.state_handlers[new_state]()
            except Exception as e:
                logger.error(f"状态处理函数执行异常: {e}", exc_info=True)

        return True

    def get_current_state(self) -> GameState:
        """获取当前状态"""
        return self.current_state

    def can_transition_to(self, state: GameState) -> bool:
        """
        检查是否可以转换到指定状态

        Args:
            state: 目标状态

        Returns:
            bool: 是否可以转换
        """
        return state in self.VALID_TRANSITIONS.get(self.current_state, [])
