"""
配置管理器

负责加载、保存和管理各种配置。
"""

import json
import logging
from dataclasses import asdict, fields, replace
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

import yaml

from .game_config import (
    AIConfig, GameConfig, SystemConfig,
    DEFAULT_AI_CONFIG, DEFAULT_GAME_CONFIG, DEFAULT_SYSTEM_CONFIG
)
from ..utils.exceptions import ConfigurationError

T = TypeVar('T')

logger = logging.getLogger(__name__)

VALID_COLORS = ('white', 'black')
VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigManager:
    """
    配置管理器

    负责加载、保存和管理系统的各种配置。
    """

    def __init__(self, config_dir: str = "configs"):
        """
        初始化配置管理器

        Args:
            config_dir: 配置文件目录
        """
        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.config_files = {
            'ai': self.config_dir / 'ai_config.yaml',
            'game': self.config_dir / 'game_config.yaml',
            'system': self.config_dir / 'system_config.yaml'
        }

        self.default_configs = {
            'ai': DEFAULT_AI_CONFIG,
            'game': DEFAULT_GAME_CONFIG,
            'system': DEFAULT_SYSTEM_CONFIG
        }

        self.config_types = {
            'ai': AIConfig,
            'game': GameConfig,
            'system': SystemConfig
        }

        self._initialize_default_configs()

    def _initialize_default_configs(self):
        """初始化默认配置文件"""
        for config_name, config_obj in self.default_configs.items():
            config_file = self.config_files[config_name]
            if not config_file.exists():
                self.save_config(config_name, config_obj)
                logger.info(f"创建默认配置文件: {config_file}")

    def _default(self, config_name: str) -> Any:
        """返回默认配置的副本, 避免修改共享的默认实例"""
        return replace(self.default_configs[config_name])

    def load_config(self, config_name: str) -> Any:
        """
        加载配置

        Args:
            config_name: 配置名称

        Returns:
            配置对象, 文件不存在或无法解析时返回默认配置
        """
        if config_name not in self.config_types:
            raise ConfigurationError(config_name, "未知的配置名称")

        config_file = self.config_files[config_name]
        if not config_file.exists():
            logger.warning(f"配置文件不存在: {config_file}，使用默认配置")
            return self._default(config_name)

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError("配置文件内容应为映射")

            config = self._dict_to_dataclass(data, self.config_types[config_name])
            logger.debug(f"成功加载配置: {config_file}")
            return config

        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            logger.error(f"加载配置文件失败: {config_file}, 错误: {e}")
            return self._default(config_name)

    def save_config(self, config_name: str, config_obj: Any):
        """
        保存配置

        Args:
            config_name: 配置名称
            config_obj: 配置对象
        """
        config_file = self.config_files.get(config_name)
        if not config_file:
            raise ConfigurationError(config_name, "未知的配置名称")

        try:
            with open(config_file, 'w', encoding='utf-8') as f:
                yaml.dump(asdict(config_obj), f, default_flow_style=False,
                          allow_unicode=True, indent=2)
            logger.info(f"成功保存配置: {config_file}")

        except OSError as e:
            logger.error(f"保存配置文件失败: {config_file}, 错误: {e}")
            raise

    def get_ai_config(self) -> AIConfig:
        """获取电脑对手配置"""
        return self.load_config('ai')

    def get_game_config(self) -> GameConfig:
        """获取对局配置"""
        return self.load_config('game')

    def get_system_config(self) -> SystemConfig:
        """获取系统配置"""
        return self.load_config('system')

    def update_config(self, config_name: str, **kwargs):
        """
        更新配置

        Args:
            config_name: 配置名称
            **kwargs: 要更新的配置项
        """
        config = self.load_config(config_name)

        for key, value in kwargs.items():
            if hasattr(config, key):
                setattr(config, key, value)
            else:
                logger.warning(f"配置项不存在: {key}")

        self._validate(config_name, config)
        self.save_config(config_name, config)

    def reset_config(self, config_name: str):
        """
        重置配置为默认值

        Args:
            config_name: 配置名称
        """
        self.save_config(config_name, self._default(config_name))
        logger.info(f"配置已重置为默认值: {config_name}")

    def validate_config(self, config_name: str) -> bool:
        """
        验证配置的有效性

        Args:
            config_name: 配置名称

        Returns:
            bool: 配置有效时返回True

        Raises:
            ConfigurationError: 配置无效
        """
        self._validate(config_name, self.load_config(config_name))
        return True

    def _validate(self, config_name: str, config: Any):
        """检查单个配置对象的取值范围"""
        if config_name == 'ai':
            if not isinstance(config.think_delay, (int, float)) or config.think_delay < 0:
                raise ConfigurationError('ai', f"think_delay 必须为非负数: {config.think_delay}")
            if config.seed is not None and not isinstance(config.seed, int):
                raise ConfigurationError('ai', f"seed 必须为整数: {config.seed}")
        elif config_name == 'game':
            if config.human_color not in VALID_COLORS:
                raise ConfigurationError('game', f"未知的颜色: {config.human_color}")
        elif config_name == 'system':
            if str(config.log_level).upper() not in VALID_LOG_LEVELS:
                raise ConfigurationError('system', f"未知的日志级别: {config.log_level}")

    def get_all_configs(self) -> Dict[str, Any]:
        """
        获取所有配置

        Returns:
            Dict[str, Any]: 所有配置的字典
        """
        return {name: self.load_config(name) for name in self.config_types}

    def export_configs(self, export_path: str):
        """
        导出所有配置到文件

        Args:
            export_path: 导出文件路径, 后缀为 .yaml 或 .json
        """
        export_data = {name: asdict(config) for name, config in self.get_all_configs().items()}

        export_file = Path(export_path)
        with open(export_file, 'w', encoding='utf-8') as f:
            if export_file.suffix in ('.yaml', '.yml'):
                yaml.dump(export_data, f, default_flow_style=False,
                          allow_unicode=True, indent=2)
            else:
                json.dump(export_data, f, ensure_ascii=False, indent=2)

        logger.info(f"配置已导出到: {export_path}")

    def _dict_to_dataclass(self, data: Dict[str, Any], dataclass_type: Type[T]) -> T:
        """
        将字典转换为数据类对象, 忽略未知字段

        Args:
            data: 字典数据
            dataclass_type: 数据类类型

        Returns:
            数据类对象
        """
        field_names = {f.name for f in fields(dataclass_type)}
        filtered_data = {k: v for k, v in data.items() if k in field_names}
        return dataclass_type(**filtered_data)
