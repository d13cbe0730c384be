"""
游戏控制器
Game Controller - match lifecycle and text notifications
"""
from typing import Optional, Callable
from .state_machine import GameState, GameStateMachine
from .game_logic import MatchSession, RoundRecord, RoundOutcome, to_display_name
from .players import PlayerBase
from ..utils.config_loader import DEFAULT_ROUNDS
from ..utils.exceptions import NoActiveMatchException
from ..utils.logger import setup_logger

logger = setup_logger("RSP.GameController")

OutputSink = Callable[[str], None]


class GameController:
    """游戏控制器类，管理比赛的生命周期（IDLE -> RUNNING -> FINISHED）"""

    def __init__(self, first_player: PlayerBase, second_player: PlayerBase):
        """
        初始化游戏控制器

        Args:
            first_player: 先手方（人类玩家）
            second_player: 后手方（电脑）
        """
        self.first_player = first_player
        self.second_player = second_player

        self.current_match: Optional[MatchSession] = None
        self._output_sink: Optional[OutputSink] = None

        self.state_machine = GameStateMachine(initial_state=GameState.IDLE)
        self.state_machine.register_state_handler(GameState.FINISHED, self._handle_finished)

        logger.info("游戏控制器初始化完成")

    def set_output_sink(self, sink: Optional[OutputSink]):
        """
        注册文本输出回调（单一槽位），None表示丢弃所有消息

        Args:
            sink: 接收格式化文本的回调
        """
        self._output_sink = sink

    def new_match(self, rounds: int = DEFAULT_ROUNDS) -> MatchSession:
        """
        丢弃旧比赛，创建并开始新比赛

        Args:
            rounds: 回合数

        Returns:
            MatchSession: 新的比赛会话
        """
        match = MatchSession(self.first_player, self.second_player, rounds)
        match.on_round_completed(self._handle_round_completed)
        self.current_match = match

        self.state_machine.transition_to(GameState.RUNNING)
        logger.info(f"新比赛开始，回合数: {rounds}")
        self._emit(f"=== New Match ({rounds} rounds) ===")
        return match

    def play_single_round(self) -> RoundRecord:
        """
        进行当前比赛的一个回合

        Returns:
            RoundRecord: 本回合记录

        Raises:
            NoActiveMatchException: 没有比赛或比赛不在进行中
        """
        state = self.state_machine.get_current_state()
        if self.current_match is None or not self.state_machine.can_transition_to(GameState.FINISHED):
            logger.warning(f"没有进行中的比赛，当前状态: {state}")
            raise NoActiveMatchException("No active match.", game_state=str(state))

        # 比赛可能已通过get_current_match()在控制器之外打完
        if self.current_match.get_remaining_rounds() == 0:
            logger.warning("当前比赛的回合已全部完成")
            self.state_machine.transition_to(GameState.FINISHED)
            raise NoActiveMatchException("No active match.", game_state=str(GameState.FINISHED))

        record = self.current_match.play_round()

        if self.current_match.is_running():
            self.state_machine.transition_to(GameState.RUNNING)
        else:
            self.state_machine.transition_to(GameState.FINISHED)

        return record

    def get_state(self) -> GameState:
        """获取当前状态"""
        return self.state_machine.get_current_state()

    def get_current_match(self) -> Optional[MatchSession]:
        """获取当前比赛（尚未开始任何比赛时为None）"""
        return self.current_match

    def format_outcome(self, outcome: RoundOutcome) -> str:
        """
        获取回合结果文本

        Args:
            outcome: 回合结果

        Returns:
            str: 结果文本
        """
        if outcome == RoundOutcome.FIRST_WINS:
            return f"{self.first_player.name} Wins"
        if outcome == RoundOutcome.SECOND_WINS:
            return f"{self.second_player.name} Wins"
        return "Draw"

    def _handle_round_completed(self, round_index: int, record: RoundRecord):
        """回合完成回调，格式化并输出回合结果"""
        self._emit(
            f"Round {round_index + 1}: "
            f"{to_display_name(record.first_selection.gesture)} vs "
            f"{to_display_name(record.second_selection.gesture)} -> "
            f"{self.format_outcome(record.outcome)}"
        )

    def _handle_finished(self):
        """处理比赛结束状态，输出总结"""
        match = self.current_match
        summary = "\n".join([
            "",
            "=== Match Over ===",
            f"{self.first_player.name}: {match.get_first_score()} wins",
            f"{self.second_player.name}: {match.get_second_score()} wins",
            f"Draws: {match.get_draw_count()}",
            f"Winner: {match.determine_overall_winner()}"
        ])
        logger.info(f"比赛结束，胜者: {match.determine_overall_winner()}")
        self._emit(summary)

    def _emit(self, message: str):
        """发送消息到输出回调（未注册时丢弃）"""
        if self._output_sink is None:
            return
        try:
            self._output_sink(message)
        except Exception as e:
            logger.error(f"输出回调异常: {e}")
