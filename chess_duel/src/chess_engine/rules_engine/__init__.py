"""
国际象棋规则引擎模块

包含棋盘表示、走法表示、走法合法性判断和棋局验证。
"""

from .pieces import Color, PieceKind, Piece
from .move import Move, Square, BOARD_SIZE
from .chess_board import ChessBoard, initial_board, apply_move
from .rule_engine import RuleEngine, MovementRule, MOVEMENT_RULES, is_legal_move
from .board_validator import BoardValidator

__all__ = [
    'Color', 'PieceKind', 'Piece',
    'Move', 'Square', 'BOARD_SIZE',
    'ChessBoard', 'initial_board', 'apply_move',
    'RuleEngine', 'MovementRule', 'MOVEMENT_RULES', 'is_legal_move',
    'BoardValidator'
]
