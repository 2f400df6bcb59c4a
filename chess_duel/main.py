#!/usr/bin/env python3
"""
Chess Duel 主入口文件

提供命令行界面: 在终端中与电脑对弈、查看战绩。
"""

import sys
from dataclasses import replace
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from chess_duel import __version__, __description__
from chess_duel.src.chess_engine.config import ConfigManager
from chess_duel.src.chess_engine.game_interface import (
    GameResult, GameSession, StatsStore
)
from chess_duel.src.chess_engine.rules_engine import Color, Square
from chess_duel.src.chess_engine.utils import ChessEngineError, setup_logger

console = Console()

RESULT_MESSAGES = {
    GameResult.HUMAN_WIN: "[bold green]你吃掉了对方的王, 获胜![/bold green]",
    GameResult.AI_WIN: "[bold red]电脑吃掉了你的王, 失败。[/bold red]",
    GameResult.DRAW: "[bold blue]走棋方没有合法走法, 和棋。[/bold blue]",
    GameResult.RESIGNED: "[bold red]你认输了。[/bold red]",
}


def print_banner():
    """打印项目横幅"""
    banner_text = Text()
    banner_text.append("♔ Chess Duel ♚\n", style="bold blue")
    banner_text.append(f"版本: {__version__}\n", style="green")
    banner_text.append(__description__, style="white")

    console.print(Panel(
        banner_text,
        title="国际象棋人机对弈",
        title_align="center",
        border_style="blue",
        padding=(1, 2)
    ))


def parse_move(text: str) -> Tuple[Square, Square]:
    """
    解析 "行 列 行 列" 格式的走法输入, 例如 "6 4 4 4"

    Raises:
        click.BadParameter: 格式错误
    """
    parts = text.replace(',', ' ').split()
    try:
        if len(parts) != 4:
            raise ValueError(text)
        from_row, from_col, to_row, to_col = (int(part) for part in parts)
    except ValueError:
        raise click.BadParameter("请输入四个整数: 起始行 起始列 目标行 目标列")
    return (from_row, from_col), (to_row, to_col)


def render_session(session: GameSession):
    """在终端中显示棋盘和回合信息"""
    if session.is_thinking:
        turn = "电脑思考中..."
    elif session.current_color == session.human_color:
        turn = "你的回合"
    else:
        turn = "电脑的回合"
    title = f"第{session.move_count + 1}步 · {turn}"
    console.print(Panel(session.board.to_visual_string(), title=title, border_style="cyan",
                        expand=False))


@click.group()
@click.version_option(version=__version__, prog_name="Chess Duel")
@click.option('--debug', is_flag=True, help='在控制台输出调试日志')
@click.option('--config', 'config_dir', type=click.Path(file_okay=False), default='configs',
              help='配置文件目录')
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_dir: str):
    """国际象棋人机对弈 - 人类对战随机走子的电脑"""
    config_manager = ConfigManager(config_dir)
    config_manager.validate_config('system')
    system_config = config_manager.get_system_config()
    setup_logger(
        level='DEBUG' if debug else system_config.log_level,
        log_file=system_config.log_file,
        log_dir=system_config.log_dir,
        max_size=system_config.log_max_size,
        backup_count=system_config.log_backup_count,
        console_output=debug
    )
    ctx.obj = {'config_manager': config_manager}


@cli.command()
@click.option('--seed', type=int, default=None, help='电脑随机种子')
@click.option('--delay', type=float, default=None, help='电脑思考延迟(秒)')
@click.pass_context
def play(ctx: click.Context, seed: Optional[int], delay: Optional[float]):
    """在终端中与电脑对弈"""
    config_manager: ConfigManager = ctx.obj['config_manager']
    config_manager.validate_config('ai')
    config_manager.validate_config('game')

    ai_config = config_manager.get_ai_config()
    if seed is not None:
        ai_config = replace(ai_config, seed=seed)
    if delay is not None:
        ai_config = replace(ai_config, think_delay=delay)
    game_config = config_manager.get_game_config()
    store = StatsStore(game_config.stats_file)

    session = GameSession(
        ai_config=ai_config,
        human_color=Color(game_config.human_color),
        on_finish=store.record
    )
    session.start()
    console.print("[dim]输入走法 \"起始行 起始列 目标行 目标列\" (如 6 4 4 4), "
                  "输入 resign 认输, quit 退出。[/dim]")

    while not session.is_over:
        render_session(session)

        if session.current_color != session.human_color:
            with console.status("电脑思考中..."):
                move = session.play_ai_turn(wait=True)
            if move is not None:
                console.print(f"电脑走棋: {move}")
            continue

        text = click.prompt("你的走法").strip().lower()
        if text == 'quit':
            console.print("[yellow]对局未完成, 不计入战绩[/yellow]")
            return
        if text == 'resign':
            session.resign()
            break

        try:
            from_pos, to_pos = parse_move(text)
            if not session.submit_human_move(from_pos, to_pos):
                console.print("[red]非法走法, 请重新输入[/red]")
        except click.BadParameter as e:
            console.print(f"[red]{e.message}[/red]")
        except ChessEngineError as e:
            console.print(f"[red]{escape(str(e))}[/red]")

    render_session(session)
    console.print(RESULT_MESSAGES[session.result])
    _print_stats(store)


def _print_stats(store: StatsStore):
    stats = store.load()
    table = Table(title="战绩统计")
    table.add_column("胜", justify="center", style="green")
    table.add_column("负", justify="center", style="red")
    table.add_column("和", justify="center", style="blue")
    table.add_column("胜率", justify="center", style="bold")
    table.add_row(str(stats.wins), str(stats.losses), str(stats.draws), f"{stats.win_rate}%")
    console.print(table)


@cli.command()
@click.pass_context
def stats(ctx: click.Context):
    """显示战绩统计"""
    game_config = ctx.obj['config_manager'].get_game_config()
    _print_stats(StatsStore(game_config.stats_file))


@cli.command()
def info():
    """显示系统信息"""
    print_banner()


def main():
    """主入口函数"""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]程序被用户中断[/yellow]")
        sys.exit(0)
    except ChessEngineError as e:
        console.print(f"[red]发生错误: {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
