"""
国际象棋引擎

人机对弈的核心: 规则引擎、棋盘表示和电脑选步策略,
以及回合控制、配置、日志和战绩统计。
"""

__version__ = "0.1.0"
__author__ = "Chess Duel Team"

from .rules_engine import (
    ChessBoard, Color, Move, Piece, PieceKind, RuleEngine, BoardValidator,
    initial_board, apply_move, is_legal_move
)
from .move_selector import MoveSelector, RandomMoveSelector, choose_move
from .game_interface import GameSession, GameStatus, GameResult, GameStats, StatsStore
from .config import ConfigManager, AIConfig, GameConfig, SystemConfig
from .utils import setup_logger, get_logger, ChessEngineError, OutOfBoundsError

__all__ = [
    "__version__", "__author__",
    "ChessBoard", "Color", "Move", "Piece", "PieceKind", "RuleEngine", "BoardValidator",
    "initial_board", "apply_move", "is_legal_move",
    "MoveSelector", "RandomMoveSelector", "choose_move",
    "GameSession", "GameStatus", "GameResult", "GameStats", "StatsStore",
    "ConfigManager", "AIConfig", "GameConfig", "SystemConfig",
    "setup_logger", "get_logger", "ChessEngineError", "OutOfBoundsError"
]
