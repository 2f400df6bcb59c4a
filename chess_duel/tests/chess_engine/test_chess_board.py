"""
测试ChessBoard、Move、Piece和BoardValidator的功能
"""

import numpy as np
import pytest

from chess_duel.src.chess_engine.rules_engine import (
    BoardValidator, ChessBoard, Color, Move, Piece, PieceKind, RuleEngine,
    apply_move, initial_board
)
from chess_duel.src.chess_engine.utils.exceptions import OutOfBoundsError


class TestChessBoard:
    """ChessBoard类的测试"""

    def test_initial_board_setup(self):
        """测试初始棋局设置"""
        board = initial_board()

        assert board.board.shape == (8, 8)
        assert len(board.get_all_pieces()) == 32
        assert len(board.get_all_pieces(Color.WHITE)) == 16

        assert board.find_king(Color.WHITE) == (7, 4)
        assert board.find_king(Color.BLACK) == (0, 4)
        assert board.get_piece_at((7, 3)) == Piece(PieceKind.QUEEN, Color.WHITE)
        assert board.get_piece_at((0, 0)) == Piece(PieceKind.ROOK, Color.BLACK)
        assert board.get_piece_at((0, 6)) == Piece(PieceKind.KNIGHT, Color.BLACK)

        for col in range(8):
            assert board.get_piece_at((6, col)) == Piece(PieceKind.PAWN, Color.WHITE)
            assert board.get_piece_at((1, col)) == Piece(PieceKind.PAWN, Color.BLACK)
            for row in range(2, 6):
                assert board.is_empty((row, col))

    def test_count_pieces(self):
        """测试棋子计数"""
        counts = initial_board().count_pieces(Color.BLACK)
        assert counts[Piece(PieceKind.PAWN, Color.BLACK)] == 8
        assert counts[Piece(PieceKind.KING, Color.BLACK)] == 1
        assert sum(counts.values()) == 16

    def test_apply_move_does_not_mutate_input(self):
        """测试执行走法返回新棋盘, 原棋盘不变"""
        board = ChessBoard()
        snapshot = board.to_matrix()

        new_board = apply_move(board, Move((6, 4), (4, 4)))

        assert np.array_equal(board.board, snapshot)
        assert new_board is not board
        assert new_board.is_empty((6, 4))
        assert new_board.get_piece_at((4, 4)) == Piece(PieceKind.PAWN, Color.WHITE)

    def test_non_capturing_round_trip(self):
        """测试不吃子的走法来回执行后恢复原局面"""
        board = ChessBoard()
        for move in RuleEngine().generate_legal_moves(board, Color.WHITE):
            assert board.is_empty(move.to_pos)
            restored = board.apply_move(move).apply_move(move.reversed())
            assert restored == board

    def test_capture_is_lossy(self):
        """测试吃子覆盖目标格, 反向走法不能恢复被吃的棋子"""
        board = ChessBoard.from_pieces({
            (4, 4): Piece(PieceKind.ROOK, Color.WHITE),
            (4, 7): Piece(PieceKind.KING, Color.BLACK),
        })
        move = Move((4, 4), (4, 7))
        after, captured = board.apply_move_with_capture(move)

        assert captured == Piece(PieceKind.KING, Color.BLACK)
        assert after.find_king(Color.BLACK) is None
        assert after.apply_move(move.reversed()) != board

    def test_apply_move_without_capture_reports_none(self):
        """测试不吃子时被吃棋子为None"""
        _, captured = ChessBoard().apply_move_with_capture(Move((7, 1), (5, 2)))
        assert captured is None

    def test_set_piece_is_functional(self):
        """测试放置棋子返回新棋盘"""
        board = ChessBoard.empty()
        queen = Piece(PieceKind.QUEEN, Color.BLACK)
        new_board = board.set_piece((3, 3), queen)

        assert board.is_empty((3, 3))
        assert new_board.get_piece_at((3, 3)) == queen
        assert new_board.set_piece((3, 3), None).is_empty((3, 3))

    def test_matrix_conversion(self):
        """测试矩阵格式转换"""
        board = ChessBoard()
        matrix = board.to_matrix()
        matrix[4, 4] = 99  # 修改副本不影响棋盘

        assert board.board[4, 4] == 0
        assert ChessBoard.from_matrix(board.to_matrix()) == board

        with pytest.raises(ValueError):
            ChessBoard.from_matrix(np.zeros((10, 9), dtype=int))

    def test_piece_ownership_helpers(self):
        """测试己方/敌方棋子判断"""
        board = ChessBoard()
        assert board.is_own_piece((7, 0), Color.WHITE)
        assert board.is_enemy_piece((0, 0), Color.WHITE)
        assert not board.is_enemy_piece((4, 4), Color.WHITE)
        assert not board.is_own_piece((4, 4), Color.BLACK)

    def test_out_of_bounds_access(self):
        """测试越界访问抛出异常"""
        board = ChessBoard()
        with pytest.raises(OutOfBoundsError):
            board.get_piece_at((8, 0))
        with pytest.raises(OutOfBoundsError):
            board.set_piece((0, -1), None)

    def test_equality_and_hash(self):
        """测试棋盘相等性和哈希"""
        assert ChessBoard() == ChessBoard()
        assert hash(ChessBoard()) == hash(ChessBoard())
        assert ChessBoard() != ChessBoard.empty()
        assert ChessBoard() != "board"

    def test_visual_string(self):
        """测试可视化字符串"""
        text = ChessBoard().to_visual_string()
        lines = text.splitlines()
        assert len(lines) == 9
        assert '♚' in lines[1]
        assert '♔' in lines[8]
        assert lines[4].count('·') == 8


class TestMoveAndPiece:
    """Move和Piece的测试"""

    def test_move_validates_squares(self):
        """测试走法坐标校验"""
        with pytest.raises(OutOfBoundsError) as exc_info:
            Move((0, 0), (0, 8))
        assert exc_info.value.error_code == "OUT_OF_BOUNDS"
        assert str(exc_info.value).startswith("[OUT_OF_BOUNDS]")

        with pytest.raises(OutOfBoundsError):
            Move((0, 0), "a1")

    def test_move_value_semantics(self):
        """测试走法的相等性和字典转换"""
        move = Move((6, 4), (4, 4))
        assert move == Move([6, 4], [4, 4])
        assert len({move, Move((6, 4), (4, 4))}) == 1
        assert move.reversed() == Move((4, 4), (6, 4))
        assert (move.row_delta, move.col_delta) == (-2, 0)
        assert Move.from_dict(move.to_dict()) == move

    def test_piece_codes(self):
        """测试棋子编码转换"""
        white_knight = Piece(PieceKind.KNIGHT, Color.WHITE)
        black_knight = Piece(PieceKind.KNIGHT, Color.BLACK)

        assert white_knight.code == -black_knight.code
        assert Piece.from_code(white_knight.code) == white_knight
        assert Piece.from_code(0) is None
        assert black_knight.symbol == '♞'
        assert Piece(PieceKind.QUEEN, Color.WHITE).is_sliding
        assert not white_knight.is_sliding

    def test_color_properties(self):
        """测试颜色属性"""
        assert Color.WHITE.opponent is Color.BLACK
        assert Color.BLACK.opponent is Color.WHITE
        assert Color.WHITE.forward == -1
        assert Color.BLACK.pawn_start_row == 1


class TestBoardValidator:
    """BoardValidator的测试"""

    def setup_method(self):
        self.validator = BoardValidator()

    def test_initial_board_is_valid(self):
        """测试初始局面合法"""
        is_valid, errors = self.validator.validate(ChessBoard())
        assert is_valid, f"初始棋局应该是合法的，但发现错误: {errors}"

    def test_missing_king(self):
        """测试缺少王"""
        board = ChessBoard().set_piece((0, 4), None)
        is_valid, errors = self.validator.validate(board)
        assert not is_valid
        assert any("王" in error for error in errors)

    def test_pawn_on_back_rank(self):
        """测试兵在底线"""
        board = ChessBoard().set_piece((0, 0), Piece(PieceKind.PAWN, Color.WHITE))
        is_valid, errors = self.validator.validate_piece_positions(board)
        assert not is_valid

    def test_invalid_piece_code(self):
        """测试无效的棋子编码"""
        matrix = ChessBoard().to_matrix()
        matrix[4, 4] = 42
        is_valid, errors = self.validator.validate(ChessBoard.from_matrix(matrix))
        assert not is_valid
        assert "42" in errors[0]

    def test_too_many_pieces(self):
        """测试棋子数量超限"""
        board = ChessBoard().set_piece((4, 4), Piece(PieceKind.QUEEN, Color.WHITE))
        is_valid, errors = self.validator.validate_piece_counts(board)
        assert not is_valid
