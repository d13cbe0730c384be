"""
剪刀石头布游戏主程序入口
Rock Scissors Paper Game Main Entry
"""
import sys
import argparse
from typing import List, Optional

from .app import Application
from .utils.logger import setup_logger

logger = setup_logger("RSP.Main")


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(prog='rsp-game', description='剪刀石头布游戏')
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='配置文件路径（默认: config/config.yaml）'
    )
    parser.add_argument('--rounds', type=int, default=None, help='每场比赛的回合数（覆盖配置文件）')
    parser.add_argument('--name', type=str, default=None, help='默认玩家名称（覆盖配置文件）')
    parser.add_argument('--seed', type=int, default=None, help='电脑玩家随机种子（覆盖配置文件）')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    args = build_parser().parse_args(argv)

    logger.info("剪刀石头布游戏启动")

    app = Application(
        config_path=args.config,
        overrides={
            'rounds': args.rounds,
            'player_name': args.name,
            'seed': args.seed
        }
    )

    try:
        return app.run()
    except KeyboardInterrupt:
        logger.info("用户中断程序")
        return 130
    finally:
        logger.info("程序退出")


if __name__ == "__main__":
    sys.exit(main())
