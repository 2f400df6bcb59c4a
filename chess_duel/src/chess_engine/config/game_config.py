"""
配置数据结构

定义各种配置类和默认参数。
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AIConfig:
    """电脑对手配置"""
    seed: Optional[int] = None          # 随机种子, None表示每局不同
    think_delay: float = 0.5            # 电脑走棋前的"思考"延迟(秒)
    background: bool = True             # 是否在后台线程中计算走法


@dataclass
class GameConfig:
    """对局配置"""
    human_color: str = 'white'          # 人类玩家执子颜色
    stats_file: str = 'data/chess_stats.json'  # 战绩文件路径


@dataclass
class SystemConfig:
    """系统配置"""
    log_level: str = 'INFO'             # 日志级别
    log_file: Optional[str] = None      # 日志文件, None表示只输出到控制台
    log_dir: str = 'logs'               # 日志目录
    log_max_size: int = 10              # 日志文件最大大小(MB)
    log_backup_count: int = 5           # 日志备份数量


# 默认配置实例
DEFAULT_AI_CONFIG = AIConfig()
DEFAULT_GAME_CONFIG = GameConfig()
DEFAULT_SYSTEM_CONFIG = SystemConfig()
