"""命令行渲染模块.

负责把抽牌结果渲染为文本，实现显示逻辑与核心逻辑的分离。
"""

from typing import Optional, Sequence

from ...application import DrawnHand
from ...core.deck import Card, Deck, DisplayForm


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的数据。
    """

    @staticmethod
    def render_cards(cards: Sequence[Card], form: DisplayForm = DisplayForm.SHORT) -> str:
        """渲染一组牌.

        Args:
            cards: 要显示的牌
            form: 显示格式，短格式用空格分隔，长格式用逗号分隔

        Returns:
            格式化的牌面字符串
        """
        separator = " " if form is DisplayForm.SHORT else ", "
        return separator.join(card.display(form) for card in cards)

    @staticmethod
    def render_drawn_hand(
        drawn: DrawnHand,
        form: DisplayForm = DisplayForm.SHORT,
        hand_number: Optional[int] = None,
    ) -> str:
        """渲染一次抽牌结果.

        Args:
            drawn: 抽牌结果
            form: 牌面显示格式
            hand_number: 连续抽多手时的编号，None时不显示编号

        Returns:
            多行文本：可选的洗牌提示、手牌、最好牌型
        """
        lines = []
        if drawn.reshuffled:
            lines.append("Deck ran short. Reshuffling.")

        title = "Hand" if hand_number is None else f"Hand {hand_number}"
        lines.append(f"{title}: {CLIRenderer.render_cards(drawn.cards, form)}")
        lines.append(f"Best: {drawn.classification.label}")
        return "\n".join(lines)

    @staticmethod
    def render_deck_status(deck: Deck) -> str:
        """渲染牌组状态，如"Deck: 47 cards left, 5 discarded"."""
        return f"Deck: {deck.cards_remaining} cards left, {len(deck.discard_pile)} discarded"
