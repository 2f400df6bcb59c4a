"""
异常定义

定义国际象棋引擎的各种异常类型。
"""


class ChessEngineError(Exception):
    """
    国际象棋引擎基础异常

    所有引擎相关异常的基类。
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class OutOfBoundsError(ChessEngineError):
    """
    坐标越界异常

    当坐标不在棋盘范围内时抛出。这表示调用方的错误, 而不是规则上的拒绝。
    """

    def __init__(self, pos, board_size: int = 8):
        message = f"坐标越界: {pos}, 行列必须在 [0, {board_size - 1}] 范围内"
        super().__init__(message, "OUT_OF_BOUNDS")
        self.pos = pos


class InvalidMoveError(ChessEngineError):
    """
    非法走法异常

    当调用方坚持提交非法走法时抛出。
    """

    def __init__(self, move_str: str, reason: str = ""):
        message = f"非法走法: {move_str}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "INVALID_MOVE")
        self.move_str = move_str
        self.reason = reason


class GameStateError(ChessEngineError):
    """
    游戏状态异常

    当前对局状态不允许执行该操作时抛出。
    """

    def __init__(self, state_description: str, reason: str = ""):
        message = f"游戏状态错误: {state_description}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "GAME_STATE_ERROR")
        self.state_description = state_description
        self.reason = reason


class ConfigurationError(ChessEngineError):
    """
    配置错误异常

    当配置参数无效时抛出。
    """

    def __init__(self, config_name: str, reason: str = ""):
        message = f"配置错误 - {config_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "CONFIG_ERROR")
        self.config_name = config_name
        self.reason = reason


class StatsStoreError(ChessEngineError):
    """
    战绩存储异常

    当战绩文件无法读取或写入时抛出。
    """

    def __init__(self, path: str, reason: str = ""):
        message = f"战绩文件错误 - {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "STATS_STORE_ERROR")
        self.path = path
        self.reason = reason
