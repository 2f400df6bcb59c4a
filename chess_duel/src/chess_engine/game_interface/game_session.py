"""
对局会话管理

GameSession 是回合控制器: 持有当前棋盘、走棋方和步数, 串行化人类走法与电脑走法。
电脑走法可以在后台线程中计算; 计算期间拒绝人类走法, 计算结果在会话锁内一次性提交。
"""

import threading
import time
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..config.game_config import AIConfig
from ..move_selector import MoveSelector, RandomMoveSelector
from ..rules_engine import ChessBoard, Color, Move, Piece, PieceKind, RuleEngine, Square
from ..utils.exceptions import GameStateError, InvalidMoveError
from ..utils.logger import LoggerMixin


class GameStatus(Enum):
    """对局状态枚举"""
    WAITING = "waiting"          # 等待开始
    PLAYING = "playing"          # 对局进行中
    FINISHED = "finished"        # 已结束


class GameResult(Enum):
    """对局结果枚举"""
    ONGOING = "ongoing"          # 进行中
    HUMAN_WIN = "human_win"      # 人类吃掉了电脑的王
    AI_WIN = "ai_win"            # 电脑吃掉了人类的王
    DRAW = "draw"                # 走棋方没有合法走法
    RESIGNED = "resigned"        # 人类认输


class GameSession(LoggerMixin):
    """对局会话"""

    def __init__(self,
                 ai_config: Optional[AIConfig] = None,
                 human_color: Color = Color.WHITE,
                 selector: Optional[MoveSelector] = None,
                 rule_engine: Optional[RuleEngine] = None,
                 on_finish: Optional[Callable[[GameResult], None]] = None):
        """
        初始化对局会话

        Args:
            ai_config: 电脑对手配置
            human_color: 人类玩家执子颜色
            selector: 电脑选步策略, 默认为按配置种子初始化的随机选择器
            rule_engine: 规则引擎
            on_finish: 对局结束时调用一次的回调, 参数为对局结果
        """
        self.session_id = str(uuid.uuid4())
        self.ai_config = ai_config or AIConfig()
        self.human_color = human_color
        self.ai_color = human_color.opponent
        self.rule_engine = rule_engine or RuleEngine()
        self.selector = selector or RandomMoveSelector(
            seed=self.ai_config.seed, rule_engine=self.rule_engine
        )
        self.on_finish = on_finish

        self.board = ChessBoard.initial()
        self.current_color = Color.WHITE
        self.move_count = 0
        self.status = GameStatus.WAITING
        self.result = GameResult.ONGOING
        self.last_move: Optional[Move] = None
        self.last_captured: Optional[Piece] = None
        self.started_at: Optional[datetime] = None
        self.finished_at: Optional[datetime] = None

        self._lock = threading.RLock()
        self._thinking = threading.Event()
        self._ai_thread: Optional[threading.Thread] = None
        self._ai_move: Optional[Move] = None
        self._ai_error: Optional[Exception] = None

    # ==================== 状态 ====================

    @property
    def is_thinking(self) -> bool:
        """电脑是否正在计算走法"""
        return self._thinking.is_set()

    @property
    def is_over(self) -> bool:
        return self.status == GameStatus.FINISHED

    def start(self):
        """开始新的对局: 初始局面, 白方先走"""
        with self._lock:
            if self.is_thinking:
                raise GameStateError(self.status.value, "电脑正在思考, 不能重新开始")

            self.board = ChessBoard.initial()
            self.current_color = Color.WHITE
            self.move_count = 0
            self.status = GameStatus.PLAYING
            self.result = GameResult.ONGOING
            self.last_move = None
            self.last_captured = None
            self.started_at = datetime.now()
            self.finished_at = None

        self.logger.info(f"对局开始: {self.session_id}, 人类执{self.human_color.value}")

    def _require_playing(self):
        if self.status != GameStatus.PLAYING:
            raise GameStateError(self.status.value, "对局未在进行中")

    # ==================== 人类走法 ====================

    def submit_human_move(self, from_pos: Square, to_pos: Square, strict: bool = False) -> bool:
        """
        提交人类玩家的走法

        Args:
            from_pos: 起始位置
            to_pos: 目标位置
            strict: 为True时非法走法抛出 InvalidMoveError, 否则返回False

        Returns:
            bool: 走法是否被接受

        Raises:
            GameStateError: 对局未进行, 不是人类的回合, 或电脑正在思考
            InvalidMoveError: strict模式下走法非法
            OutOfBoundsError: 坐标越界
        """
        with self._lock:
            self._require_playing()
            if self.is_thinking:
                raise GameStateError(self.status.value, "电脑正在思考")
            if self.current_color != self.human_color:
                raise GameStateError(self.status.value, "不是人类玩家的回合")

            move = Move(from_pos, to_pos)
            if not (self.board.is_own_piece(move.from_pos, self.human_color) and
                    self.rule_engine.is_legal(self.board, move)):
                self.logger.warning(f"拒绝非法走法: {move}")
                if strict:
                    raise InvalidMoveError(str(move), "不符合走法规则")
                return False

            finished = self._commit(move, self.human_color)

        if finished:
            self._notify_finish()
        return True

    # ==================== 电脑走法 ====================

    def play_ai_turn(self, wait: bool = True) -> Optional[Move]:
        """
        让电脑走一步

        Args:
            wait: 后台模式下是否等待计算完成

        Returns:
            Optional[Move]: 电脑的走法; 后台模式且不等待时, 或电脑没有合法走法时返回None

        Raises:
            GameStateError: 对局未进行, 不是电脑的回合, 或电脑已在思考
            ChessEngineError: 等待时, 后台计算或 on_finish 回调抛出的异常
        """
        with self._lock:
            self._require_playing()
            if self.current_color != self.ai_color:
                raise GameStateError(self.status.value, "不是电脑的回合")
            if self.is_thinking:
                raise GameStateError(self.status.value, "电脑已在思考")
            self._thinking.set()
            self._ai_move = None
            self._ai_error = None
            board = self.board
            move_number = self.move_count

        if not self.ai_config.background:
            return self._run_ai_turn(board, move_number)

        self._ai_thread = threading.Thread(
            target=self._run_ai_turn_in_background, args=(board, move_number),
            name=f"ai-turn-{self.session_id[:8]}", daemon=True
        )
        self._ai_thread.start()
        if wait:
            self._ai_thread.join()
            self._raise_ai_error()
            return self._ai_move
        return None

    def _run_ai_turn(self, board: ChessBoard, move_number: int) -> Optional[Move]:
        """计算并提交电脑走法; 计算期间不持有会话锁, on_finish 在锁外调用"""
        try:
            if self.ai_config.think_delay > 0:
                time.sleep(self.ai_config.think_delay)

            move = self.selector.select_move(board, self.ai_color)

            with self._lock:
                self._thinking.clear()
                # 思考期间人类可能已经认输
                if self.status != GameStatus.PLAYING or self.move_count != move_number:
                    self.logger.info("对局状态已改变, 丢弃电脑走法")
                    return None
                if move is None:
                    self._finish(GameResult.DRAW)
                    finished = True
                else:
                    finished = self._commit(move, self.ai_color)
                    self._ai_move = move
        finally:
            self._thinking.clear()

        if finished:
            self._notify_finish()
        return move

    def _run_ai_turn_in_background(self, board: ChessBoard, move_number: int):
        """后台线程入口, 异常留给 play_ai_turn / wait_for_ai 抛出"""
        try:
            self._run_ai_turn(board, move_number)
        except Exception as e:
            self.logger.error(f"电脑走棋失败: {e}")
            self._ai_error = e

    def _raise_ai_error(self):
        error, self._ai_error = self._ai_error, None
        if error is not None:
            raise error

    def wait_for_ai(self, timeout: Optional[float] = None) -> bool:
        """
        等待后台的电脑走法完成

        Args:
            timeout: 超时时间(秒)

        Returns:
            bool: 电脑是否已经不在思考

        Raises:
            ChessEngineError: 后台计算或 on_finish 回调抛出的异常
        """
        thread = self._ai_thread
        if thread is not None:
            thread.join(timeout)
            if not thread.is_alive():
                self._raise_ai_error()
        return not self.is_thinking

    # ==================== 其他操作 ====================

    def resign(self):
        """人类玩家认输"""
        with self._lock:
            self._require_playing()
            self._finish(GameResult.RESIGNED)
        self._notify_finish()

    def _commit(self, move: Move, color: Color) -> bool:
        """
        在会话锁内提交走法

        Returns:
            bool: 对局是否因此结束 (吃掉了王, 或对方已无合法走法)
        """
        new_board, captured = self.board.apply_move_with_capture(move)
        self.board = new_board
        self.move_count += 1
        self.current_color = color.opponent
        self.last_move = move
        self.last_captured = captured

        self.logger.info(f"第{self.move_count}步 {color.value}: {move}"
                         + (f", 吃掉 {captured}" if captured else ""))

        if captured is not None and captured.kind is PieceKind.KING:
            self._finish(GameResult.HUMAN_WIN if color == self.human_color else GameResult.AI_WIN)
            return True
        if not self.rule_engine.has_legal_moves(self.board, self.current_color):
            self.logger.info(f"{self.current_color.value} 没有合法走法")
            self._finish(GameResult.DRAW)
            return True
        return False

    def _finish(self, result: GameResult):
        self.status = GameStatus.FINISHED
        self.result = result
        self.finished_at = datetime.now()
        self.logger.info(f"对局结束: {self.session_id}, 结果: {result.value}, 共{self.move_count}步")

    def _notify_finish(self):
        if self.on_finish is not None:
            self.on_finish(self.result)

    def snapshot(self) -> Dict[str, Any]:
        """
        获取对局状态快照

        Returns:
            Dict[str, Any]: 棋盘文本, 走棋方, 步数, 状态和结果
        """
        with self._lock:
            return {
                'session_id': self.session_id,
                'board': self.board.to_visual_string(),
                'current_color': self.current_color.value,
                'human_color': self.human_color.value,
                'move_count': self.move_count,
                'status': self.status.value,
                'result': self.result.value,
                'thinking': self.is_thinking,
                'last_move': self.last_move.to_dict() if self.last_move else None
            }
