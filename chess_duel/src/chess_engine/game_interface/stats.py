"""
战绩统计

累计胜、负、和的局数, 并以JSON文件保存。
"""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from .game_session import GameResult
from ..utils.exceptions import StatsStoreError

logger = logging.getLogger(__name__)


@dataclass
class GameStats:
    """人类玩家的累计战绩"""
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self) -> int:
        """胜率百分比, 四舍五入到整数; 没有对局时为0"""
        if self.total == 0:
            return 0
        return int(self.wins * 100 / self.total + 0.5)

    def record(self, result: GameResult):
        """
        记录一局结果

        Args:
            result: 对局结果, 认输计为负

        Raises:
            ValueError: 对局尚未结束
        """
        if result is GameResult.HUMAN_WIN:
            self.wins += 1
        elif result in (GameResult.AI_WIN, GameResult.RESIGNED):
            self.losses += 1
        elif result is GameResult.DRAW:
            self.draws += 1
        else:
            raise ValueError(f"对局尚未结束, 不能记录: {result.value}")


class StatsStore:
    """战绩文件存储"""

    def __init__(self, path: str):
        self.path = Path(path)

    def load(self) -> GameStats:
        """
        读取战绩, 文件不存在时返回全零战绩

        Raises:
            StatsStoreError: 文件无法读取或内容无效
        """
        if not self.path.exists():
            return GameStats()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return GameStats(
                wins=int(data.get('wins', 0)),
                losses=int(data.get('losses', 0)),
                draws=int(data.get('draws', 0))
            )
        except (OSError, ValueError, TypeError, AttributeError) as e:
            raise StatsStoreError(str(self.path), str(e))

    def save(self, stats: GameStats):
        """
        保存战绩

        Raises:
            StatsStoreError: 文件无法写入
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(asdict(stats), f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise StatsStoreError(str(self.path), str(e))
        logger.debug(f"战绩已保存: {self.path}")

    def record(self, result: GameResult) -> GameStats:
        """读取, 记录一局结果并保存"""
        stats = self.load()
        stats.record(result)
        self.save(stats)
        logger.info(f"战绩更新: {result.value}, 胜{stats.wins} 负{stats.losses} 和{stats.draws}")
        return stats
