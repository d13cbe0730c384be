"""
比赛会话
Match Session - runs a fixed number of rounds between two players
"""
from typing import Optional, List, Tuple, Callable, TYPE_CHECKING
from dataclasses import dataclass, field
from datetime import datetime
from .gesture import Gesture
from .game_rules import RoundOutcome, evaluate
from .selection import Selection
from ...utils.config_loader import DEFAULT_ROUNDS
from ...utils.exceptions import MatchOverException, ConfigurationException
from ...utils.logger import setup_logger

if TYPE_CHECKING:
    from ..players.player_base import PlayerBase

logger = setup_logger("RSP.MatchSession")

DRAW = "Draw"

RoundCallback = Callable[[int, "RoundRecord"], None]


@dataclass(frozen=True)
class RoundRecord:
    """回合记录，创建后不可修改；结果每次由两次出拳重新计算"""
    round_number: int
    first_gesture: Gesture
    second_gesture: Gesture
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def first_selection(self) -> Selection:
        """先手方出拳（副本）"""
        return Selection(self.first_gesture)

    @property
    def second_selection(self) -> Selection:
        """后手方出拳（副本）"""
        return Selection(self.second_gesture)

    @property
    def outcome(self) -> RoundOutcome:
        return evaluate(self.first_gesture, self.second_gesture)

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'round_number': self.round_number,
            'first_gesture': self.first_gesture.value,
            'second_gesture': self.second_gesture.value,
            'outcome': self.outcome.value,
            'timestamp': self.timestamp.isoformat()
        }


@dataclass
class MatchStatistics:
    """比赛统计信息"""
    total_rounds: int = DEFAULT_ROUNDS
    rounds_played: int = 0
    first_wins: int = 0
    second_wins: int = 0
    draws: int = 0
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    def get_win_rate(self) -> float:
        """
        获取先手方胜率

        Returns:
            float: 胜率（0.0-1.0）
        """
        if self.rounds_played == 0:
            return 0.0
        return self.first_wins / self.rounds_played

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'total_rounds': self.total_rounds,
            'rounds_played': self.rounds_played,
            'first_wins': self.first_wins,
            'second_wins': self.second_wins,
            'draws': self.draws,
            'win_rate': self.get_win_rate(),
            'start_time': self.start_time.isoformat() if self.start_time else None,
            'end_time': self.end_time.isoformat() if self.end_time else None
        }


class MatchSession:
    """比赛会话类，负责回合循环和比分累计"""

    DEFAULT_ROUNDS = DEFAULT_ROUNDS

    def __init__(self, first_player: "PlayerBase", second_player: "PlayerBase",
                 rounds: int = DEFAULT_ROUNDS):
        """
        初始化比赛会话

        Args:
            first_player: 先手方（通常是人类玩家）
            second_player: 后手方（通常是电脑）
            rounds: 回合数，必须为正整数

        Raises:
            ConfigurationException: 回合数不合法
        """
        if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds <= 0:
            raise ConfigurationException(f"回合数必须是正整数: {rounds!r}", config_key="rounds")

        self.first_player = first_player
        self.second_player = second_player
        self.total_rounds = rounds

        self._history: List[RoundRecord] = []
        self._first_score = 0
        self._second_score = 0
        self._draws = 0
        self._running = False
        self._start_time: Optional[datetime] = None
        self._end_time: Optional[datetime] = None
        self._round_callback: Optional[RoundCallback] = None

        logger.info(f"比赛会话初始化: {first_player.name} vs {second_player.name}, 回合数: {rounds}")

    def _mark_started(self):
        self._running = True
        self._start_time = datetime.now()

    def _mark_stopped(self):
        self._running = False
        self._end_time = datetime.now()

    def play_round(self) -> RoundRecord:
        """
        进行一回合

        Returns:
            RoundRecord: 本回合记录

        Raises:
            MatchOverException: 所有回合已完成
        """
        if len(self._history) >= self.total_rounds:
            logger.warning("所有回合已完成，无法继续")
            raise MatchOverException("All rounds have already been played.",
                                     rounds_played=len(self._history))

        if not self._running:
            self._mark_started()

        # 先手方先出拳，结果与顺序无关
        first_gesture = self.first_player.choose_selection().gesture
        second_gesture = self.second_player.choose_selection().gesture

        record = RoundRecord(
            round_number=len(self._history) + 1,
            first_gesture=first_gesture,
            second_gesture=second_gesture
        )

        outcome = record.outcome
        if outcome == RoundOutcome.FIRST_WINS:
            self._first_score += 1
        elif outcome == RoundOutcome.SECOND_WINS:
            self._second_score += 1
        else:
            self._draws += 1

        self._history.append(record)
        logger.info(f"回合 {record.round_number}: {first_gesture} vs "
                    f"{second_gesture} -> {outcome.value}")

        if self._round_callback:
            self._round_callback(len(self._history) - 1, record)

        if len(self._history) >= self.total_rounds:
            self._mark_stopped()
            logger.info(f"比赛结束，{self._first_score}:{self._second_score}，平局: {self._draws}")

        return record

    def run_to_completion(self):
        """连续进行剩余的全部回合，直到完成或被stop()中止"""
        self._mark_started()

        while self._running and len(self._history) < self.total_rounds:
            self.play_round()

        self._mark_stopped()

    def stop(self):
        """立即停止比赛，已完成的回合保留"""
        self._mark_stopped()
        logger.info(f"比赛被停止，已完成回合: {len(self._history)}/{self.total_rounds}")

    def determine_overall_winner(self) -> str:
        """
        根据累计比分判断总胜者

        Returns:
            str: 胜者名称，比分相同时为"Draw"
        """
        if self._first_score > self._second_score:
            return self.first_player.name
        if self._second_score > self._first_score:
            return self.second_player.name
        return DRAW

    def on_round_completed(self, callback: Optional[RoundCallback]):
        """
        注册回合完成回调（单一槽位，新回调替换旧回调）

        Args:
            callback: 参数为(从0开始的回合索引, 回合记录)
        """
        self._round_callback = callback

    def get_rounds_played(self) -> int:
        return len(self._history)

    def get_remaining_rounds(self) -> int:
        return self.total_rounds - len(self._history)

    def get_first_score(self) -> int:
        return self._first_score

    def get_second_score(self) -> int:
        return self._second_score

    def get_draw_count(self) -> int:
        return self._draws

    def get_round_history(self) -> Tuple[RoundRecord, ...]:
        """获取回合历史（只读）"""
        return tuple(self._history)

    def get_last_round(self) -> Optional[RoundRecord]:
        if self._history:
            return self._history[-1]
        return None

    def is_running(self) -> bool:
        return self._running

    def get_elapsed_seconds(self) -> float:
        """
        获取比赛用时

        Returns:
            float: 进行中按当前时间计算，停止后固定为开始到结束的时长；未开始为0
        """
        if self._start_time is None:
            return 0.0
        if self._running:
            return (datetime.now() - self._start_time).total_seconds()
        if self._end_time is None or self._end_time < self._start_time:
            return 0.0
        return (self._end_time - self._start_time).total_seconds()

    def get_statistics(self) -> MatchStatistics:
        """获取统计信息快照"""
        return MatchStatistics(
            total_rounds=self.total_rounds,
            rounds_played=len(self._history),
            first_wins=self._first_score,
            second_wins=self._second_score,
            draws=self._draws,
            start_time=self._start_time,
            end_time=self._end_time
        )
