"""
HandService - 抽牌评估服务

负责持有一副牌和一个评估器，完成"抽牌 → 评估"的流程.
服务只返回数据，如何显示由UI层决定.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from ..core.config import DeckConfig
from ..core.deck import Card, Deck
from ..core.eval import Classification, HandEvaluator


@dataclass(frozen=True)
class DrawnHand:
    """
    一次抽牌的结果.

    Attributes:
        cards: 抽出的牌，按点数升序，鬼牌在最后
        classification: 最好牌型
        reshuffled: 本次抽牌前是否因牌不够而自动洗牌
    """
    cards: Tuple[Card, ...]
    classification: Classification
    reshuffled: bool = False


class HandService:
    """抽牌评估服务"""

    def __init__(
        self,
        deck: Optional[Deck] = None,
        evaluator: Optional[HandEvaluator] = None,
        config: Optional[DeckConfig] = None,
    ) -> None:
        """
        初始化服务.

        Args:
            deck: 使用的牌组，None时按config创建新牌组
            evaluator: 牌型评估器，None时创建默认评估器
            config: 牌组配置，仅在deck为None时使用
        """
        self.logger = logging.getLogger(__name__)
        self._deck = deck if deck is not None else Deck.from_config(config or DeckConfig())
        self._evaluator = evaluator if evaluator is not None else HandEvaluator()

    @property
    def deck(self) -> Deck:
        """服务使用的牌组."""
        return self._deck

    def shuffle(self) -> None:
        """收回弃牌并洗牌."""
        self._deck.shuffle()
        self.logger.info("牌组已洗牌，剩余%d张", self._deck.cards_remaining)

    def draw_hand(self, count: int) -> DrawnHand:
        """
        抽牌并评估.

        Args:
            count: 抽牌张数

        Returns:
            DrawnHand: 抽出的牌和评估结果

        Raises:
            ValueError: 当count不是正整数时
            InsufficientCardsError: 当整副牌都不足count张时
        """
        # 非法的count交给Deck.draw报ValueError
        reshuffled = isinstance(count, int) and self._deck.cards_remaining < count
        cards = self._deck.draw(count)
        classification = self._evaluator.evaluate(cards)
        self.logger.info("抽出%d张牌: %s", len(cards), classification.label)
        return DrawnHand(tuple(cards), classification, reshuffled)

    def evaluate_cards(self, cards: Sequence[Card]) -> Classification:
        """评估外部给定的牌，不影响牌组."""
        return self._evaluator.evaluate(cards)

    def evaluate_strings(self, card_strs: Iterable[str]) -> Classification:
        """
        解析短格式字符串并评估.

        Args:
            card_strs: 如["10S", "JS", "Jk(R)"]

        Returns:
            Classification: 评估结果

        Raises:
            ValueError: 当任一字符串无法解析时
        """
        cards = [Card.from_str(card_str) for card_str in card_strs]
        return self.evaluate_cards(cards)
