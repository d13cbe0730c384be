"""
应用程序主类
Application Main Class - console front-end
"""
from pathlib import Path
from typing import Optional, Callable, Dict, Any
from .game import GameController, GameState, Gesture, HumanPlayer, ComputerPlayer
from .utils.logger import setup_logger, get_log_level, apply_log_level
from .utils.config_loader import ConfigLoader, GameSettings
from .utils.error_handler import global_error_handler
from .utils.exceptions import GameException, ConfigurationException

logger = setup_logger("RSP.App")

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "config.yaml"

GESTURE_PROMPT = "  Choose: 1) Rock  2) Scissors  3) Paper  > "


class Application:
    """应用程序主类，负责控制台输入输出和"再来一局"循环"""

    def __init__(self, config_path: Optional[str] = None,
                 overrides: Optional[Dict[str, Any]] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        """
        初始化应用程序

        Args:
            config_path: 配置文件路径（默认: config/config.yaml）
            overrides: 覆盖配置文件中game段的值（来自命令行）
            input_func: 读取一行输入的函数，参数为提示文本（默认input）
            output_func: 输出一行文本的函数（默认print）
        """
        self.config_path = config_path or str(DEFAULT_CONFIG_PATH)
        self.overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        self.input_func = input_func or input
        self.output_func = output_func or print

        self.config = {}
        self.settings = GameSettings()
        self.game_controller: Optional[GameController] = None
        self.player_name: Optional[str] = None

    def load_config(self) -> bool:
        """
        加载配置文件，文件不存在时使用默认配置

        Returns:
            bool: 配置是否可用
        """
        try:
            self.config = ConfigLoader.load_config(self.config_path)
        except FileNotFoundError:
            logger.warning(f"配置文件不存在: {self.config_path}，使用默认配置")
            self.config = {}
        except Exception as e:
            global_error_handler.handle(ConfigurationException(str(e)), "加载配置")
            return False

        logging_config = ConfigLoader.get_logging_config(self.config)
        if logging_config:
            apply_log_level(get_log_level(logging_config.get('level', 'INFO')),
                            log_file=logging_config.get('file'))

        game_config = dict(ConfigLoader.get_game_config(self.config))
        game_config.update(self.overrides)

        try:
            self.settings = ConfigLoader.load_game_settings({**self.config, 'game': game_config})
        except ConfigurationException as e:
            global_error_handler.handle(e, "解析游戏配置")
            return False

        logger.info(f"游戏配置: {self.settings.to_dict()}")
        return True

    def read_gesture(self) -> Gesture:
        """
        从控制台读取手势，输入不合法时重新提示

        Returns:
            Gesture: 玩家选择的手势
        """
        while True:
            gesture = Gesture.from_string(self.input_func(GESTURE_PROMPT))
            if gesture is not None:
                return gesture
            self.output_func("  Invalid input. Try again.")

    def ask_player_name(self) -> str:
        """询问玩家名称，留空时使用配置中的默认名称"""
        name = self.input_func("  Enter your name: ").strip()
        return name or self.settings.player_name

    def ask_play_again(self) -> bool:
        """询问是否再来一局"""
        answer = self.input_func("\n  Play again? (y/n): ").strip().lower()
        return answer == "y"

    def show(self, message: str):
        """游戏控制器的输出回调"""
        for line in message.split("\n"):
            self.output_func(f"  {line}" if line else "")

    def initialize(self):
        """创建玩家和游戏控制器"""
        self.player_name = self.ask_player_name()

        user = HumanPlayer(self.player_name, self.read_gesture)
        computer = ComputerPlayer(self.settings.computer_name, seed=self.settings.seed)

        self.game_controller = GameController(user, computer)
        self.game_controller.set_output_sink(self.show)
        logger.info(f"玩家: {self.player_name}, 对手: {computer.name}")

    def play_match(self):
        """进行一场完整的比赛"""
        self.game_controller.new_match(self.settings.rounds)
        while self.game_controller.get_state() == GameState.RUNNING:
            self.game_controller.play_single_round()

    def run(self) -> int:
        """
        运行应用程序主循环

        Returns:
            int: 退出码
        """
        self.output_func("")
        self.output_func("  =============================================")
        self.output_func("       Rock - Scissors - Paper   (Console)")
        self.output_func("  =============================================")
        self.output_func("")

        if not self.load_config():
            return 1

        try:
            self.initialize()
            while True:
                self.play_match()
                if not self.ask_play_again():
                    break
        except EOFError:
            logger.info("输入结束，退出游戏")
        except GameException as e:
            global_error_handler.handle(e, "主循环")
            return 1

        self.output_func(f"\n  Thanks for playing, {self.player_name or self.settings.player_name}! Goodbye.\n")
        return 0
