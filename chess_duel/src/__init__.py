"""
Chess Duel 源代码模块

- chess_engine: 国际象棋规则引擎与人机对弈
"""

from . import chess_engine

__all__ = [
    "chess_engine",
]
