"""
国际象棋棋盘数据结构

定义8x8棋盘的表示、访问和函数式更新。
棋盘本身是一个值: 所有改变棋子分布的操作都返回新的棋盘, 不修改原棋盘。
"""

from typing import Dict, List, Optional, Tuple

import numpy as np

from .move import BOARD_SIZE, Move, Square, validate_square
from .pieces import Color, Piece, PieceKind

# 底线棋子排列: 车马象后王象马车
BACK_RANK = [
    PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.QUEEN,
    PieceKind.KING, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK
]


class ChessBoard:
    """
    国际象棋棋盘类

    内部使用8x8的整数矩阵存储棋子:
    0为空格, 正数为白方, 负数为黑方, 绝对值为 PieceKind 的编码。
    第0行是黑方底线, 第7行是白方底线。
    """

    EMPTY = 0

    def __init__(self, matrix: Optional[np.ndarray] = None):
        """
        初始化棋盘

        Args:
            matrix: 8x8的棋盘矩阵, 为None时创建标准初始局面
        """
        if matrix is None:
            self.board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=int)
            self._setup_initial_position()
        else:
            matrix = np.asarray(matrix, dtype=int)
            if matrix.shape != (BOARD_SIZE, BOARD_SIZE):
                raise ValueError(f"棋盘尺寸错误: {matrix.shape}, 应为(8, 8)")
            self.board = matrix.copy()

    def _setup_initial_position(self):
        """设置标准初始局面"""
        for color in (Color.WHITE, Color.BLACK):
            back_row = color.back_row
            pawn_row = color.pawn_start_row
            for col, kind in enumerate(BACK_RANK):
                self.board[back_row, col] = Piece(kind, color).code
            self.board[pawn_row, :] = Piece(PieceKind.PAWN, color).code

    @classmethod
    def initial(cls) -> 'ChessBoard':
        """创建标准初始局面"""
        return cls()

    @classmethod
    def empty(cls) -> 'ChessBoard':
        """创建空棋盘"""
        return cls(np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=int))

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> 'ChessBoard':
        """
        从矩阵创建棋盘对象

        Args:
            matrix: 8x8的棋盘矩阵

        Returns:
            ChessBoard: 棋盘对象
        """
        return cls(matrix)

    @classmethod
    def from_pieces(cls, pieces: Dict[Square, Piece]) -> 'ChessBoard':
        """
        从 {位置: 棋子} 映射创建棋盘, 其余位置为空

        Args:
            pieces: 位置到棋子的映射

        Returns:
            ChessBoard: 棋盘对象
        """
        matrix = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=int)
        for pos, piece in pieces.items():
            row, col = validate_square(pos)
            matrix[row, col] = piece.code
        return cls(matrix)

    def to_matrix(self) -> np.ndarray:
        """
        转换为矩阵格式

        Returns:
            np.ndarray: 8x8的棋盘矩阵副本
        """
        return self.board.copy()

    # ==================== 访问 ====================

    def get_piece_at(self, pos: Square) -> Optional[Piece]:
        """
        获取指定位置的棋子

        Args:
            pos: 位置坐标 (行, 列)

        Returns:
            Optional[Piece]: 棋子, 空格返回None

        Raises:
            OutOfBoundsError: 坐标越界
        """
        row, col = validate_square(pos)
        return Piece.from_code(self.board[row, col])

    def is_empty(self, pos: Square) -> bool:
        """检查指定位置是否为空"""
        row, col = validate_square(pos)
        return self.board[row, col] == self.EMPTY

    def is_enemy_piece(self, pos: Square, color: Color) -> bool:
        """检查指定位置是否为敌方棋子"""
        piece = self.get_piece_at(pos)
        return piece is not None and piece.color != color

    def is_own_piece(self, pos: Square, color: Color) -> bool:
        """检查指定位置是否为己方棋子"""
        piece = self.get_piece_at(pos)
        return piece is not None and piece.color == color

    def find_king(self, color: Color) -> Optional[Square]:
        """
        找到指定颜色的王的位置

        Args:
            color: 棋子颜色

        Returns:
            Optional[Square]: 王的位置, 找不到返回None
        """
        positions = np.argwhere(self.board == Piece(PieceKind.KING, color).code)
        if len(positions) == 0:
            return None
        row, col = positions[0]
        return int(row), int(col)

    def get_all_pieces(self, color: Optional[Color] = None) -> List[Tuple[Square, Piece]]:
        """
        获取所有棋子的位置和种类, 按行列顺序

        Args:
            color: 指定颜色, None表示所有棋子

        Returns:
            List[Tuple[Square, Piece]]: [(位置, 棋子), ...]
        """
        pieces = []
        for row, col in np.argwhere(self.board != self.EMPTY):
            piece = Piece.from_code(self.board[row, col])
            if color is None or piece.color == color:
                pieces.append(((int(row), int(col)), piece))
        return pieces

    def count_pieces(self, color: Optional[Color] = None) -> Dict[Piece, int]:
        """
        统计棋子数量

        Args:
            color: 指定颜色, None表示统计所有棋子

        Returns:
            Dict[Piece, int]: {棋子: 数量}
        """
        counts: Dict[Piece, int] = {}
        for _, piece in self.get_all_pieces(color):
            counts[piece] = counts.get(piece, 0) + 1
        return counts

    # ==================== 函数式更新 ====================

    def set_piece(self, pos: Square, piece: Optional[Piece]) -> 'ChessBoard':
        """
        在指定位置放置棋子 (None表示清空), 返回新的棋盘

        Args:
            pos: 位置坐标
            piece: 棋子或None

        Returns:
            ChessBoard: 新的棋盘
        """
        row, col = validate_square(pos)
        new_board = self.copy()
        new_board.board[row, col] = piece.code if piece else self.EMPTY
        return new_board

    def apply_move_with_capture(self, move: Move) -> Tuple['ChessBoard', Optional[Piece]]:
        """
        执行走法并返回被吃掉的棋子

        不检查走法合法性, 调用方需要先通过规则引擎验证。

        Args:
            move: 要执行的走法

        Returns:
            Tuple[ChessBoard, Optional[Piece]]: (新的棋盘, 被吃掉的棋子)
        """
        from_row, from_col = move.from_pos
        to_row, to_col = move.to_pos

        new_board = self.copy()
        captured = Piece.from_code(new_board.board[to_row, to_col])

        # 目标格上的棋子被覆盖, 这是唯一的吃子方式
        new_board.board[to_row, to_col] = new_board.board[from_row, from_col]
        new_board.board[from_row, from_col] = self.EMPTY

        return new_board, captured

    def apply_move(self, move: Move) -> 'ChessBoard':
        """
        执行走法, 返回新的棋盘状态

        Args:
            move: 要执行的走法

        Returns:
            ChessBoard: 新的棋盘状态
        """
        new_board, _ = self.apply_move_with_capture(move)
        return new_board

    def copy(self) -> 'ChessBoard':
        """创建棋盘副本"""
        return ChessBoard(self.board)

    # ==================== 表示 ====================

    def to_visual_string(self) -> str:
        """
        转换为可视化字符串

        Returns:
            str: 可视化的棋盘字符串
        """
        lines = ["  " + " ".join(str(col) for col in range(BOARD_SIZE))]
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                piece = Piece.from_code(self.board[row, col])
                cells.append(piece.symbol if piece else '·')
            lines.append(f"{row} " + " ".join(cells))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_visual_string()

    def __repr__(self) -> str:
        return f"ChessBoard(pieces={len(self.get_all_pieces())})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChessBoard):
            return False
        return np.array_equal(self.board, other.board)

    def __hash__(self) -> int:
        return hash(self.board.tobytes())


def initial_board() -> ChessBoard:
    """标准初始局面工厂函数"""
    return ChessBoard.initial()


def apply_move(board: ChessBoard, move: Move) -> ChessBoard:
    """
    对棋盘执行走法, 返回新棋盘, 不修改输入

    Args:
        board: 当前棋盘
        move: 已经验证过的合法走法

    Returns:
        ChessBoard: 新的棋盘
    """
    return board.apply_move(move)
