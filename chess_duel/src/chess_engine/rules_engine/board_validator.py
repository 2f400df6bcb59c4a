"""
棋局合法性验证器

检查棋盘结构、棋子编码、棋子数量和兵的位置。
"""

from typing import Dict, List, Tuple

import numpy as np

from .chess_board import ChessBoard
from .move import BOARD_SIZE
from .pieces import Color, Piece, PieceKind


class BoardValidator:
    """
    棋局合法性验证器

    用于检查外部构造的棋盘是否处于正常对局状态。
    """

    def __init__(self):
        """初始化验证器"""
        # 每方棋子数量上限 (不考虑升变)
        self.piece_limits: Dict[PieceKind, int] = {
            PieceKind.KING: 1,
            PieceKind.QUEEN: 1,
            PieceKind.ROOK: 2,
            PieceKind.BISHOP: 2,
            PieceKind.KNIGHT: 2,
            PieceKind.PAWN: 8,
        }
        self.valid_codes = {0} | {
            Piece(kind, color).code for kind in PieceKind for color in Color
        }

    def validate_board_structure(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        验证棋盘基本结构

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []

        if board.board.shape != (BOARD_SIZE, BOARD_SIZE):
            errors.append(f"棋盘尺寸错误: {board.board.shape}, 应为(8, 8)")
            return False, errors

        if not np.issubdtype(board.board.dtype, np.integer):
            errors.append(f"棋盘数据类型错误: {board.board.dtype}, 应为int")

        for row, col in np.ndindex(board.board.shape):
            code = int(board.board[row, col])
            if code not in self.valid_codes:
                errors.append(f"位置({row}, {col})的棋子编码无效: {code}")

        return len(errors) == 0, errors

    def validate_piece_counts(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        验证棋子数量: 每方恰好一个王, 其他棋子不超过上限

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []
        counts = board.count_pieces()

        for color in Color:
            for kind, limit in self.piece_limits.items():
                count = counts.get(Piece(kind, color), 0)
                if kind is PieceKind.KING and count != 1:
                    errors.append(f"{color.value} 王的数量错误: {count}, 应为1")
                elif count > limit:
                    errors.append(f"{color.value} {kind.name.lower()} 数量超限: {count} > {limit}")

        return len(errors) == 0, errors

    def validate_piece_positions(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        验证棋子位置: 兵不能出现在任何一方的底线

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []
        back_rows = {Color.WHITE.back_row, Color.BLACK.back_row}

        for pos, piece in board.get_all_pieces():
            if piece.kind is PieceKind.PAWN and pos[0] in back_rows:
                errors.append(f"兵不能位于底线: {pos}")

        return len(errors) == 0, errors

    def validate(self, board: ChessBoard) -> Tuple[bool, List[str]]:
        """
        完整验证棋局

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 所有错误信息)
        """
        is_valid, errors = self.validate_board_structure(board)
        if not is_valid:
            return False, errors

        for check in (self.validate_piece_counts, self.validate_piece_positions):
            _, check_errors = check(board)
            errors.extend(check_errors)

        return len(errors) == 0, errors
