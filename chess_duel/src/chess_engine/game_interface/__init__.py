"""
对局接口模块

回合控制器和战绩统计。
"""

from .game_session import GameSession, GameStatus, GameResult
from .stats import GameStats, StatsStore

__all__ = ['GameSession', 'GameStatus', 'GameResult', 'GameStats', 'StatsStore']
