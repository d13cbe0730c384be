"""
配置加载工具模块
Configuration Loader Utility
"""
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional
from .exceptions import ConfigurationException
from .logger import setup_logger

logger = setup_logger("RSP.ConfigLoader")

DEFAULT_ROUNDS = 10


@dataclass
class GameSettings:
    """游戏配置"""
    rounds: int = DEFAULT_ROUNDS
    player_name: str = "Player"
    computer_name: str = "Computer"
    seed: Optional[int] = None
    
    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'rounds': self.rounds,
            'player_name': self.player_name,
            'computer_name': self.computer_name,
            'seed': self.seed
        }


class ConfigLoader:
    """配置加载器类"""
    
    @staticmethod
    def load_config(config_path: str) -> Dict[str, Any]:
        """
        从YAML文件加载配置
        
        Args:
            config_path: 配置文件路径
            
        Returns:
            Dict[str, Any]: 配置字典
            
        Raises:
            FileNotFoundError: 配置文件不存在
            yaml.YAMLError: YAML解析错误
        """
        config_file = Path(config_path)
        
        if not config_file.exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")
        
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML解析错误: {e}")
            raise
        
        if config is None:
            logger.warning(f"配置文件为空: {config_path}")
            return {}
        
        if not isinstance(config, dict):
            raise ConfigurationException(f"配置文件顶层必须是映射: {config_path}")
        
        logger.info(f"成功加载配置文件: {config_path}")
        return config
    
    @staticmethod
    def save_config(config: Dict[str, Any], config_path: str) -> bool:
        """
        保存配置到YAML文件
        
        Args:
            config: 配置字典
            config_path: 配置文件路径
            
        Returns:
            bool: 保存是否成功
        """
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)
        
        try:
            with open(config_file, 'w', encoding='utf-8') as f:
                yaml.dump(config, f, default_flow_style=False,
                          allow_unicode=True, sort_keys=False)
            
            logger.info(f"成功保存配置文件: {config_path}")
            return True
            
        except OSError as e:
            logger.error(f"保存配置文件失败: {e}")
            return False
    
    @staticmethod
    def get_game_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取游戏配置
        
        Args:
            config: 完整配置字典
            
        Returns:
            Dict[str, Any]: 游戏配置字典
        """
        return config.get('game') or {}
    
    @staticmethod
    def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取日志配置
        
        Args:
            config: 完整配置字典
            
        Returns:
            Dict[str, Any]: 日志配置字典
        """
        return config.get('logging') or {}
    
    @staticmethod
    def load_game_settings(config: Dict[str, Any]) -> GameSettings:
        """
        解析并校验游戏配置
        
        Args:
            config: 完整配置字典
            
        Returns:
            GameSettings: 游戏配置
            
        Raises:
            ConfigurationException: 回合数或种子不合法
        """
        game_config = ConfigLoader.get_game_config(config)
        defaults = GameSettings()
        
        rounds = game_config.get('rounds', defaults.rounds)
        if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds <= 0:
            raise ConfigurationException(f"回合数必须是正整数: {rounds!r}", config_key="game.rounds")
        
        seed = game_config.get('seed')
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ConfigurationException(f"随机种子必须是整数: {seed!r}", config_key="game.seed")
        
        return GameSettings(
            rounds=rounds,
            player_name=str(game_config.get('player_name') or defaults.player_name),
            computer_name=str(game_config.get('computer_name') or defaults.computer_name),
            seed=seed
        )
