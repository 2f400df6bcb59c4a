"""
走法选择器

电脑一方的选步策略。所有策略都基于规则引擎给出的完整合法走法列表,
因此替换策略 (例如按子力加权或极小极大搜索) 不需要修改调用方。
"""

import random
from abc import ABC, abstractmethod
from typing import List, Optional

from ..rules_engine import ChessBoard, Color, Move, RuleEngine
from ..utils.logger import LoggerMixin


class MoveSelector(LoggerMixin, ABC):
    """
    走法选择策略基类

    子类只需要实现 _pick, 从非空的合法走法列表中选出一个。
    """

    def __init__(self, rule_engine: Optional[RuleEngine] = None):
        self.rule_engine = rule_engine or RuleEngine()

    def select_move(self, board: ChessBoard, color: Color) -> Optional[Move]:
        """
        为指定颜色选择一个走法

        Args:
            board: 当前棋盘
            color: 走棋方颜色

        Returns:
            Optional[Move]: 选中的走法, 没有合法走法时返回None
        """
        legal_moves = self.rule_engine.generate_legal_moves(board, color)
        if not legal_moves:
            self.logger.info(f"{color.value} 没有合法走法")
            return None

        move = self._pick(board, color, legal_moves)
        self.logger.debug(f"{color.value} 从 {len(legal_moves)} 个走法中选择 {move}")
        return move

    @abstractmethod
    def _pick(self, board: ChessBoard, color: Color, legal_moves: List[Move]) -> Move:
        """从非空的合法走法列表中选择一个"""


class RandomMoveSelector(MoveSelector):
    """
    随机走法选择器

    在所有合法走法中均匀随机选择。随机源通过构造参数注入, 相同种子可以复现对局。
    """

    def __init__(self, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None,
                 rule_engine: Optional[RuleEngine] = None):
        """
        初始化随机选择器

        Args:
            seed: 随机种子, rng 为None时使用
            rng: 随机数生成器
            rule_engine: 规则引擎
        """
        super().__init__(rule_engine)
        self.rng = rng if rng is not None else random.Random(seed)

    def _pick(self, board: ChessBoard, color: Color, legal_moves: List[Move]) -> Move:
        return self.rng.choice(legal_moves)


def choose_move(board: ChessBoard, color: Color,
                rng: Optional[random.Random] = None) -> Optional[Move]:
    """
    在指定颜色的所有合法走法中均匀随机选择一个

    Args:
        board: 当前棋盘
        color: 走棋方颜色
        rng: 随机数生成器, 为None时使用一个未设种子的新生成器

    Returns:
        Optional[Move]: 选中的走法, 没有合法走法时返回None
    """
    return RandomMoveSelector(rng=rng).select_move(board, color)
