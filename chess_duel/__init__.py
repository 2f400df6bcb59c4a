"""
国际象棋人机对弈 (Chess Duel)

人类执白, 电脑执黑; 电脑在所有合法走法中随机选择。
"""

__version__ = "0.1.0"
__author__ = "Chess Duel Team"
__description__ = "国际象棋人机对弈 - 规则引擎、随机电脑对手和终端界面"

from chess_duel.src import chess_engine

__all__ = [
    "chess_engine",
    "__version__",
    "__author__",
    "__description__",
]
