"""命令行入口.

这个模块使用click提供三个命令：
- draw: 洗牌后抽若干手牌并显示最好牌型
- evaluate: 评估命令行给出的牌
- play: 交互式反复抽牌
"""

import logging

import click

from ... import __version__
from ...application import HandService
from ...core.config import DeckConfig, LOG_LEVELS, LoggingConfig, configure_logging
from ...core.deck import DisplayForm
from ...core.exceptions import InsufficientCardsError
from .render import CLIRenderer

logger = logging.getLogger(__name__)


def _display_form(short_form: bool) -> DisplayForm:
    return DisplayForm.SHORT if short_form else DisplayForm.LONG


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="日志级别",
)
@click.version_option(__version__, prog_name="jokerhand")
def cli(log_level: str) -> None:
    """抽牌并评估最好的5张牌型，可选加入两张鬼牌作为万能牌。"""
    configure_logging(LoggingConfig(log_level=log_level))


@cli.command()
@click.argument("count", type=click.IntRange(min=1))
@click.option("--jokers/--no-jokers", default=False, help="加入红、黑两张鬼牌")
@click.option("--seed", type=click.IntRange(min=0), default=None, help="洗牌随机种子")
@click.option("--short", "short_form", is_flag=True, help="使用短格式显示牌面")
@click.option("--times", type=click.IntRange(min=1), default=1, show_default=True,
              help="从同一副牌连续抽几手")
def draw(count: int, jokers: bool, seed, short_form: bool, times: int) -> None:
    """洗牌后抽COUNT张牌并显示最好牌型。"""
    service = HandService(config=DeckConfig(jokers=jokers, seed=seed))
    service.shuffle()
    form = _display_form(short_form)

    for hand_number in range(1, times + 1):
        try:
            drawn = service.draw_hand(count)
        except InsufficientCardsError as e:
            raise click.ClickException(str(e))
        click.echo(CLIRenderer.render_drawn_hand(
            drawn, form, hand_number if times > 1 else None
        ))


@cli.command()
@click.argument("cards", nargs=-1, required=True)
def evaluate(cards) -> None:
    """评估给定的牌，如: jokerhand evaluate 10S JS QS KS AS"""
    try:
        classification = HandService().evaluate_strings(cards)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="CARDS")
    click.echo(classification.label)


@cli.command()
@click.option("--jokers/--no-jokers", default=False, help="加入红、黑两张鬼牌")
@click.option("--seed", type=click.IntRange(min=0), default=None, help="洗牌随机种子")
@click.option("--short", "short_form", is_flag=True, help="使用短格式显示牌面")
def play(jokers: bool, seed, short_form: bool) -> None:
    """交互式抽牌：输入张数抽牌，s 洗牌，q 退出。"""
    service = HandService(config=DeckConfig(jokers=jokers, seed=seed))
    service.shuffle()
    form = _display_form(short_form)
    click.echo(CLIRenderer.render_deck_status(service.deck))

    while True:
        answer = click.prompt("Cards to draw (s = shuffle, q = quit)", type=str).strip().lower()

        if answer in ("q", "quit"):
            break

        if answer in ("s", "shuffle"):
            service.shuffle()
            click.echo(CLIRenderer.render_deck_status(service.deck))
            continue

        try:
            count = int(answer)
        except ValueError:
            click.echo(f"Error: '{answer}' is not a number, 's' or 'q'")
            continue

        if count < 1:
            click.echo("Error: draw at least one card")
            continue

        try:
            drawn = service.draw_hand(count)
        except InsufficientCardsError as e:
            logger.warning("draw rejected: %s", e)
            click.echo(f"Error: {e}")
            continue

        click.echo(CLIRenderer.render_drawn_hand(drawn, form))


def main() -> None:
    """console script入口"""
    cli(prog_name="jokerhand")
