"""
国际象棋规则引擎

实现各棋子的走法合法性判断和合法走法生成。
不检测将军、将死和逼和; 吃掉对方的王即为终局条件, 由调用方处理。
"""

from typing import Callable, Dict, Iterator, List, NamedTuple

from .chess_board import ChessBoard
from .move import BOARD_SIZE, Move, Square, validate_square
from .pieces import Color, Piece, PieceKind
from ..utils.logger import LoggerMixin


Geometry = Callable[[ChessBoard, Piece, Square, Square], bool]


class MovementRule(NamedTuple):
    """单个棋子种类的走法规则"""
    geometry: Geometry   # 几何形状判断
    check_path: bool     # 是否需要检查中间格为空


def _is_straight(board: ChessBoard, piece: Piece, from_pos: Square, to_pos: Square) -> bool:
    return from_pos[0] == to_pos[0] or from_pos[1] == to_pos[1]


def _is_diagonal(board: ChessBoard, piece: Piece, from_pos: Square, to_pos: Square) -> bool:
    row_diff = abs(to_pos[0] - from_pos[0])
    col_diff = abs(to_pos[1] - from_pos[1])
    return row_diff == col_diff and row_diff > 0


def _is_queen_line(board: ChessBoard, piece: Piece, from_pos: Square, to_pos: Square) -> bool:
    return (_is_straight(board, piece, from_pos, to_pos) or
            _is_diagonal(board, piece, from_pos, to_pos))


def _is_knight_jump(board: ChessBoard, piece: Piece, from_pos: Square, to_pos: Square) -> bool:
    row_diff = abs(to_pos[0] - from_pos[0])
    col_diff = abs(to_pos[1] - from_pos[1])
    return (row_diff, col_diff) in ((2, 1), (1, 2))


def _is_king_step(board: ChessBoard, piece: Piece, from_pos: Square, to_pos: Square) -> bool:
    return abs(to_pos[0] - from_pos[0]) <= 1 and abs(to_pos[1] - from_pos[1]) <= 1


def _is_pawn_move(board: ChessBoard, piece: Piece, from_pos: Square, to_pos: Square) -> bool:
    """兵: 直进不吃子, 斜进只能吃子, 起始行可以直进两格"""
    direction = piece.color.forward
    from_row, from_col = from_pos
    to_row, to_col = to_pos
    target_empty = board.is_empty(to_pos)

    if to_col == from_col and target_empty:
        if to_row == from_row + direction:
            return True
        if (from_row == piece.color.pawn_start_row and
                to_row == from_row + 2 * direction and
                board.is_empty((from_row + direction, from_col))):
            return True
        return False

    # 斜进一格, 目标格必须有对方棋子
    return (abs(to_col - from_col) == 1 and
            to_row == from_row + direction and
            not target_empty)


MOVEMENT_RULES: Dict[PieceKind, MovementRule] = {
    PieceKind.PAWN: MovementRule(_is_pawn_move, check_path=False),
    PieceKind.ROOK: MovementRule(_is_straight, check_path=True),
    PieceKind.KNIGHT: MovementRule(_is_knight_jump, check_path=False),
    PieceKind.BISHOP: MovementRule(_is_diagonal, check_path=True),
    PieceKind.QUEEN: MovementRule(_is_queen_line, check_path=True),
    PieceKind.KING: MovementRule(_is_king_step, check_path=False),
}

_missing_kinds = set(PieceKind) - set(MOVEMENT_RULES)
if _missing_kinds:
    raise RuntimeError(f"走法规则表缺少棋子种类: {sorted(k.name for k in _missing_kinds)}")


def squares_between(from_pos: Square, to_pos: Square) -> Iterator[Square]:
    """
    生成起点和终点之间(不含两端)沿直线或斜线的所有格子

    Args:
        from_pos: 起始位置
        to_pos: 目标位置

    Yields:
        Square: 中间格坐标

    Raises:
        ValueError: 两点不在同一直线或斜线上
    """
    row_diff = abs(to_pos[0] - from_pos[0])
    col_diff = abs(to_pos[1] - from_pos[1])
    if row_diff != 0 and col_diff != 0 and row_diff != col_diff:
        raise ValueError(f"{from_pos} 与 {to_pos} 不在同一直线或斜线上")

    row_step = (to_pos[0] > from_pos[0]) - (to_pos[0] < from_pos[0])
    col_step = (to_pos[1] > from_pos[1]) - (to_pos[1] < from_pos[1])
    row, col = from_pos[0] + row_step, from_pos[1] + col_step
    while (row, col) != (to_pos[0], to_pos[1]):
        yield row, col
        row += row_step
        col += col_step


class RuleEngine(LoggerMixin):
    """
    国际象棋规则引擎

    负责验证走法合法性、生成合法走法。所有方法都是纯函数, 不修改棋盘。
    """

    def __init__(self, rules: Dict[PieceKind, MovementRule] = None):
        """
        初始化规则引擎

        Args:
            rules: 棋子种类到走法规则的映射, 默认为标准规则表
        """
        self.rules = rules if rules is not None else MOVEMENT_RULES

    def is_legal_move(self, board: ChessBoard, from_pos: Square, to_pos: Square) -> bool:
        """
        判断走法是否合法

        检查顺序: 起点不等于终点, 起点有棋子, 终点不是己方棋子,
        符合棋子的几何走法, 长距离棋子的路径无阻挡。

        Args:
            board: 当前棋盘
            from_pos: 起始位置
            to_pos: 目标位置

        Returns:
            bool: 是否合法

        Raises:
            OutOfBoundsError: 坐标越界
        """
        from_pos = validate_square(from_pos)
        to_pos = validate_square(to_pos)

        # 原地不动的走法对所有棋子都不合法
        if from_pos == to_pos:
            return False

        piece = board.get_piece_at(from_pos)
        if piece is None:
            return False

        # 不能吃己方棋子
        if board.is_own_piece(to_pos, piece.color):
            return False

        rule = self.rules[piece.kind]
        if not rule.geometry(board, piece, from_pos, to_pos):
            return False

        if rule.check_path:
            return self.is_path_clear(board, from_pos, to_pos)

        return True

    def is_legal(self, board: ChessBoard, move: Move) -> bool:
        """判断Move对象是否合法"""
        return self.is_legal_move(board, move.from_pos, move.to_pos)

    def is_path_clear(self, board: ChessBoard, from_pos: Square, to_pos: Square) -> bool:
        """检查起点和终点之间的格子是否全部为空"""
        return all(board.is_empty(pos) for pos in squares_between(from_pos, to_pos))

    def generate_piece_moves(self, board: ChessBoard, pos: Square) -> List[Move]:
        """
        生成指定位置棋子的所有合法走法

        Args:
            board: 当前棋盘
            pos: 棋子位置

        Returns:
            List[Move]: 合法走法列表, 空格返回空列表
        """
        pos = validate_square(pos)
        if board.is_empty(pos):
            return []

        return [
            Move(pos, (row, col))
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.is_legal_move(board, pos, (row, col))
        ]

    def generate_legal_moves(self, board: ChessBoard, color: Color) -> List[Move]:
        """
        生成指定颜色的所有合法走法

        Args:
            board: 当前棋盘
            color: 走棋方颜色

        Returns:
            List[Move]: 合法走法列表, 按起点和终点的行列顺序排列
        """
        legal_moves = []
        for pos, _ in board.get_all_pieces(color):
            legal_moves.extend(self.generate_piece_moves(board, pos))

        self.logger.debug(f"{color.value} 共有 {len(legal_moves)} 个合法走法")
        return legal_moves

    def has_legal_moves(self, board: ChessBoard, color: Color) -> bool:
        """检查指定颜色是否还有合法走法"""
        for pos, _ in board.get_all_pieces(color):
            for row in range(BOARD_SIZE):
                for col in range(BOARD_SIZE):
                    if self.is_legal_move(board, pos, (row, col)):
                        return True
        return False


_default_engine = RuleEngine()


def is_legal_move(board: ChessBoard, from_pos: Square, to_pos: Square) -> bool:
    """使用标准规则判断走法是否合法"""
    return _default_engine.is_legal_move(board, from_pos, to_pos)
