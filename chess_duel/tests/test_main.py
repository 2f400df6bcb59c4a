"""
测试命令行界面
"""

import click
import pytest
from click.testing import CliRunner

from chess_duel.main import cli, parse_move
from chess_duel.src.chess_engine.config import ConfigManager
from chess_duel.src.chess_engine.game_interface import GameStats, StatsStore
from chess_duel.src.chess_engine.utils.exceptions import ConfigurationError


@pytest.fixture
def runner():
    return CliRunner()


def test_parse_move():
    assert parse_move("6 4 4 4") == ((6, 4), (4, 4))
    assert parse_move("6,4, 4,4") == ((6, 4), (4, 4))
    with pytest.raises(click.BadParameter):
        parse_move("e2e4")
    with pytest.raises(click.BadParameter):
        parse_move("6 4 4")
    with pytest.raises(click.BadParameter):
        parse_move("--1 0 0 0")
    with pytest.raises(click.BadParameter):
        parse_move("\u00b2 0 0 0")


def test_info(runner, tmp_path):
    result = runner.invoke(cli, ['--config', str(tmp_path / 'configs'), 'info'])
    assert result.exit_code == 0
    assert "Chess Duel" in result.output


def test_stats_without_games(runner, tmp_path):
    config_dir = tmp_path / 'configs'
    ConfigManager(config_dir).update_config('game', stats_file=str(tmp_path / 'stats.json'))

    result = runner.invoke(cli, ['--config', str(config_dir), 'stats'])
    assert result.exit_code == 0
    assert "0%" in result.output


def test_play_and_resign_records_loss(runner, tmp_path):
    """测试走一步后认输, 战绩记为负"""
    config_dir = tmp_path / 'configs'
    stats_file = tmp_path / 'stats.json'
    ConfigManager(config_dir).update_config('game', stats_file=str(stats_file))

    result = runner.invoke(
        cli,
        ['--config', str(config_dir), 'play', '--seed', '1', '--delay', '0'],
        input="9 9 9 9\n6 4 3 4\nhello\n6 4 4 4\nresign\n"
    )

    assert result.exit_code == 0, result.output
    assert "OUT_OF_BOUNDS" in result.output
    assert "非法走法" in result.output
    assert "电脑走棋" in result.output
    assert "认输" in result.output
    assert StatsStore(stats_file).load() == GameStats(wins=0, losses=1, draws=0)


def test_quit_does_not_record(runner, tmp_path):
    config_dir = tmp_path / 'configs'
    stats_file = tmp_path / 'stats.json'
    ConfigManager(config_dir).update_config('game', stats_file=str(stats_file))

    result = runner.invoke(cli, ['--config', str(config_dir), 'play', '--delay', '0'],
                           input="quit\n")

    assert result.exit_code == 0
    assert not stats_file.exists()


def test_invalid_log_level_rejected(runner, tmp_path):
    """测试系统配置中的无效日志级别在启动时被拒绝"""
    config_dir = tmp_path / 'configs'
    manager = ConfigManager(config_dir)
    manager.config_files['system'].write_text("log_level: 10\n", encoding='utf-8')

    result = runner.invoke(cli, ['--config', str(config_dir), 'info'])

    assert result.exit_code != 0
    assert isinstance(result.exception, ConfigurationError)
