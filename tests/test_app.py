"""
控制台应用测试
Console Application Tests
"""
import pytest

from rsp_game.app import Application
from rsp_game.game import GameState, Gesture
from rsp_game.main import main, build_parser


class ScriptedConsole:
    """按脚本提供输入并记录输出"""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def output(self, line=""):
        self.lines.append(line)

    @property
    def text(self):
        return "\n".join(self.lines)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "game:\n"
        "  rounds: 2\n"
        "  player_name: Tester\n"
        "  computer_name: Bot\n"
        "  seed: 11\n"
        "logging:\n"
        "  level: WARNING\n",
        encoding="utf-8"
    )
    return str(path)


def make_app(config_path, answers, overrides=None):
    console = ScriptedConsole(answers)
    app = Application(config_path, overrides=overrides,
                      input_func=console.input, output_func=console.output)
    return app, console


def test_full_session(config_file):
    app, console = make_app(config_file, ["Alice", "1", "rock", "n"])
    assert app.run() == 0

    assert "=== New Match (2 rounds) ===" in console.text
    assert "Round 1: Rock vs" in console.text
    assert "Round 2: Rock vs" in console.text
    assert "=== Match Over ===" in console.text
    assert "Thanks for playing, Alice!" in console.text
    assert app.game_controller.get_state() == GameState.FINISHED


def test_invalid_input_reprompts(config_file):
    app, console = make_app(config_file, ["Alice", "7", "lizard", "3", "2", "n"])
    assert app.run() == 0
    assert console.lines.count("  Invalid input. Try again.") == 2
    history = app.game_controller.get_current_match().get_round_history()
    assert [r.first_selection.gesture for r in history] == [Gesture.PAPER, Gesture.SCISSORS]


def test_play_again(config_file):
    app, console = make_app(config_file, ["", "1", "1", "y", "2", "2", "n"])
    assert app.run() == 0
    assert console.text.count("=== Match Over ===") == 2
    assert "Thanks for playing, Tester!" in console.text


def test_end_of_input_exits_cleanly(config_file):
    app, console = make_app(config_file, ["Alice", "1"])
    assert app.run() == 0
    assert "Thanks for playing, Alice!" in console.text


def test_missing_config_uses_defaults(tmp_path):
    app, console = make_app(str(tmp_path / "missing.yaml"), [])
    assert app.load_config()
    assert app.settings.rounds == 10
    assert app.settings.player_name == "Player"


def test_overrides_win_over_file(config_file):
    app, _ = make_app(config_file, [], overrides={'rounds': 4, 'player_name': None, 'seed': 1})
    assert app.load_config()
    assert app.settings.rounds == 4
    assert app.settings.player_name == "Tester"
    assert app.settings.seed == 1


def test_bad_config_fails(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("game:\n  rounds: 0\n", encoding="utf-8")
    app, console = make_app(str(path), [])
    assert app.run() == 1


def test_show_indents_lines(config_file):
    app, console = make_app(config_file, [])
    app.show("a\n\nb")
    assert console.lines == ["  a", "", "  b"]


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.config is None
    assert args.rounds is None


def test_main_with_rounds_override(config_file, monkeypatch, capsys):
    answers = iter(["Alice", "1", "n"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--config", config_file, "--rounds", "1"]) == 0
    out = capsys.readouterr().out
    assert "=== New Match (1 rounds) ===" in out


def test_main_rejects_non_positive_rounds(config_file):
    assert main(["--config", config_file, "--rounds", "0"]) == 1
