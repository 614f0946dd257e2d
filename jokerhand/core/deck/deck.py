"""
扑克牌组管理.

定义Deck类，维护抽牌堆和弃牌堆，提供洗牌和抽牌操作.
抽牌堆不足时自动把弃牌洗回再抽.
"""

import logging
import random
from typing import List, Optional, Tuple

from ..config import DeckConfig
from ..exceptions import InsufficientCardsError
from .card import Card
from .types import JokerColor, get_all_ranks, get_all_suits

logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副扑克牌.

    包含52张标准牌，可选加入红、黑两张鬼牌. 任意时刻抽牌堆与弃牌堆互不相交，
    两者合起来恰好是构造时的全部牌，洗牌和抽牌只改变牌在两堆之间的分布和顺序.

    一副牌同一时间只应由一个调用方使用，内部不加锁.

    Attributes:
        _draw_pile: 尚未抽出的牌，列表头部为下一张要抽的牌
        _discard_pile: 已经抽出的牌，按抽出顺序排列
        _rng: 随机数生成器

    Examples:
        >>> deck = Deck(jokers=True)
        >>> deck.shuffle()
        >>> hand = deck.draw(5)
        >>> len(deck)
        49
    """

    def __init__(self, jokers: bool = False, rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            jokers: 是否加入两张鬼牌
            rng: 随机数生成器，用于洗牌操作。如果为None，使用默认随机数生成器
        """
        self._rng = rng or random.Random()
        self._draw_pile: List[Card] = []
        self._discard_pile: List[Card] = []
        self._jokers = jokers
        self.fill(jokers)

    @classmethod
    def from_config(cls, config: DeckConfig) -> 'Deck':
        """
        按配置创建牌组.

        Args:
            config: 牌组配置，seed不为None时使用固定种子的随机数生成器

        Returns:
            Deck: 新牌组，尚未洗牌
        """
        rng = random.Random(config.seed) if config.seed is not None else None
        return cls(jokers=config.jokers, rng=rng)

    def fill(self, jokers: bool = False) -> None:
        """
        按花色优先、点数其次的顺序放入全部标准牌，需要时再放入红、黑鬼牌.

        Args:
            jokers: 是否加入两张鬼牌
        """
        self._draw_pile.extend(
            Card(suit, rank)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        )
        if jokers:
            self._draw_pile.extend(Card.joker(color) for color in JokerColor)

    def return_discards(self) -> None:
        """把弃牌堆放回抽牌堆底部并清空弃牌堆."""
        self._draw_pile.extend(self._discard_pile)
        self._discard_pile = []

    def shuffle(self) -> None:
        """
        洗牌.

        先收回弃牌，再用Fisher-Yates洗牌算法打乱抽牌堆.
        """
        self.return_discards()
        self._rng.shuffle(self._draw_pile)

    def draw(self, count: int) -> List[Card]:
        """
        抽牌.

        抽牌堆不足count张时会先自动洗牌（收回弃牌），抽出的牌移入弃牌堆.

        Args:
            count: 要抽的张数，必须为正整数

        Returns:
            List[Card]: 按点数升序排列的手牌，鬼牌排在最后

        Raises:
            ValueError: 当count不是正整数时
            InsufficientCardsError: 当整副牌都不足count张时
        """
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ValueError(f"Count must be a positive integer, got {count!r}")

        if len(self._draw_pile) < count:
            logger.info("Deck only contains %d cards. Reshuffling.", len(self._draw_pile))
            self.shuffle()

        if len(self._draw_pile) < count:
            raise InsufficientCardsError(count, len(self._draw_pile))

        pulled = self._draw_pile[:count]
        self._draw_pile = self._draw_pile[count:]
        self._discard_pile.extend(pulled)

        return sorted(pulled, key=lambda card: card.rank_value())

    @property
    def draw_pile(self) -> Tuple[Card, ...]:
        """抽牌堆的只读快照."""
        return tuple(self._draw_pile)

    @property
    def discard_pile(self) -> Tuple[Card, ...]:
        """弃牌堆的只读快照."""
        return tuple(self._discard_pile)

    @property
    def cards_remaining(self) -> int:
        """抽牌堆剩余张数."""
        return len(self._draw_pile)

    @property
    def total_cards(self) -> int:
        """牌组总张数（抽牌堆加弃牌堆）."""
        return len(self._draw_pile) + len(self._discard_pile)

    @property
    def has_jokers(self) -> bool:
        """是否包含两张鬼牌."""
        return self._jokers

    def __len__(self) -> int:
        return len(self._draw_pile)

    def __repr__(self) -> str:
        return (
            f"Deck(cards_remaining={len(self._draw_pile)}, "
            f"discarded={len(self._discard_pile)}, jokers={self._jokers})"
        )
