"""
带万能牌的牌型评估器.

从任意张数的牌中找出能组成的最好5张牌型，鬼牌可以代替任意点数和花色.
评估按固定优先级逐一检查，第一个命中的牌型即为结果.
"""

import logging
from collections import Counter
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..deck.card import Card
from ..deck.types import Rank, Suit
from .types import Classification, HandCategory

logger = logging.getLogger(__name__)

WHEEL_RANKS = (Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE)
ROYAL_RANKS = (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE)

Check = Callable[[List[Card], int], Optional[Classification]]


class HandEvaluator:
    """
    牌型评估器.

    无内部状态，可在多个线程间共享. 输入不限于5张，鬼牌作为万能牌参与所有牌型.

    检查顺序（高到低）：同花顺（含皇家同花顺）→ 四条 → 葫芦 → 同花 → 顺子 →
    三条 → 两对 → 一对 → 无牌型.

    Examples:
        >>> evaluator = HandEvaluator()
        >>> cards = [Card.from_str(s) for s in ("10S", "JS", "QS", "KS", "AS")]
        >>> evaluator.evaluate(cards).label
        'Royal Flush of Spades'
    """

    def evaluate(self, cards: Sequence[Card]) -> Classification:
        """
        评估给定牌能组成的最好牌型.

        Args:
            cards: 任意张数的牌，顺序不影响结果

        Returns:
            Classification: 最好的牌型，没有任何牌型时为"Nothing!"

        Raises:
            TypeError: 当输入中包含非Card对象时
        """
        cards = list(cards)
        for i, card in enumerate(cards):
            if not isinstance(card, Card):
                raise TypeError(f"第{i}张牌必须是Card类型，实际: {type(card)}")

        naturals, joker_count = split_jokers(cards)

        result = None
        for check in self._checks():
            result = check(naturals, joker_count)
            if result is not None:
                break
        if result is None:
            result = Classification(HandCategory.NOTHING)

        logger.debug("Evaluated %d cards (%d jokers): %s", len(cards), joker_count, result.label)
        return result

    def _checks(self) -> Tuple[Check, ...]:
        """按优先级排列的牌型检查."""
        return (
            self._straight_flush,
            self._four_of_a_kind,
            self._full_house,
            self._flush,
            self._straight,
            self._three_of_a_kind,
            self._two_pair,
            self._pair,
        )

    def _straight_flush(self, naturals: List[Card], joker_count: int) -> Optional[Classification]:
        """
        同花顺检查.

        每种花色的标准牌加上全部鬼牌不少于5张时，在该花色内做顺子检查.
        多种花色都成立时取最大点数最高的，点数相同再按花色序号.

        Args:
            naturals: 非鬼牌
            joker_count: 鬼牌数

        Returns:
            Optional[Classification]: 同花顺或皇家同花顺，不成立时为None
        """
        by_suit: Dict[Suit, List[Card]] = {}
        for card in naturals:
            by_suit.setdefault(card.suit, []).append(card)

        candidates = []
        for suit, suited in by_suit.items():
            if len(suited) + joker_count < 5:
                continue
            high = straight_high_rank(suited, joker_count)
            if high is not None:
                candidates.append((high, suit, suited))

        if not candidates:
            return None

        high, suit, suited = max(candidates, key=lambda c: (c[0].index, c[1].value))

        # 10到A每张要么本花色有，要么还有剩余鬼牌可以顶替
        present = {card.rank for card in suited}
        missing = sum(1 for rank in ROYAL_RANKS if rank not in present)
        if missing <= joker_count:
            return Classification(HandCategory.ROYAL_FLUSH, Rank.ACE, suit=suit)
        return Classification(HandCategory.STRAIGHT_FLUSH, high, suit=suit)

    def _four_of_a_kind(self, naturals: List[Card], joker_count: int) -> Optional[Classification]:
        rank = best_of_a_kind(naturals, joker_count, 4)
        if rank is None:
            return None
        return Classification(HandCategory.FOUR_OF_A_KIND, rank)

    def _full_house(self, naturals: List[Card], joker_count: int) -> Optional[Classification]:
        """
        葫芦检查.

        没有鬼牌时需要真正的三条加另一对；有一张鬼牌时需要两个真正的对子，
        鬼牌把其中一对补成三条. 两张及以上鬼牌的葫芦在四条检查中已经命中，这里不处理.

        Args:
            naturals: 非鬼牌
            joker_count: 鬼牌数

        Returns:
            Optional[Classification]: 葫芦，不成立时为None
        """
        counts = Counter(card.rank for card in naturals)
        pairs = sorted((rank for rank, count in counts.items() if count >= 2), reverse=True)

        if joker_count == 0:
            triples = sorted((rank for rank, count in counts.items() if count >= 3), reverse=True)
            for triple in triples:
                others = [rank for rank in pairs if rank != triple]
                if others:
                    return Classification(HandCategory.FULL_HOUSE, triple, others[0])
            return None

        if joker_count == 1 and len(pairs) >= 2:
            return Classification(HandCategory.FULL_HOUSE, pairs[0], pairs[1])

        return None

    def _flush(self, naturals: List[Card], joker_count: int) -> Optional[Classification]:
        """同花检查. 多种花色都成立时取花色序号最高的，与点数无关."""
        counts = Counter(card.suit for card in naturals)
        suits = [suit for suit, count in counts.items() if count + joker_count >= 5]
        if not suits:
            return None
        return Classification(HandCategory.FLUSH, suit=max(suits))

    def _straight(self, naturals: List[Card], joker_count: int) -> Optional[Classification]:
        high = straight_high_rank(naturals, joker_count)
        if high is None:
            return None
        return Classification(HandCategory.STRAIGHT, high)

    def _three_of_a_kind(self, naturals: List[Card], joker_count: int) -> Optional[Classification]:
        rank = best_of_a_kind(naturals, joker_count, 3)
        if rank is None:
            return None
        return Classification(HandCategory.THREE_OF_A_KIND, rank)

    def _two_pair(self, naturals: List[Card], joker_count: int) -> Optional[Classification]:
        """
        两对检查.

        真正的对子都算候选；有鬼牌时，未成对的最大标准牌和一张鬼牌再组成一个候选对子.
        取点数最高的两个候选.

        Args:
            naturals: 非鬼牌
            joker_count: 鬼牌数

        Returns:
            Optional[Classification]: 两对，候选不足两个时为None
        """
        counts = Counter(card.rank for card in naturals)
        pairs = {rank for rank, count in counts.items() if count >= 2}

        candidates = set(pairs)
        if joker_count > 0:
            unpaired = [card.rank for card in naturals if card.rank not in pairs]
            if unpaired:
                candidates.add(max(unpaired))

        if len(candidates) < 2:
            return None

        high, low = sorted(candidates, reverse=True)[:2]
        return Classification(HandCategory.TWO_PAIR, high, low)

    def _pair(self, naturals: List[Card], joker_count: int) -> Optional[Classification]:
        rank = best_of_a_kind(naturals, joker_count, 2)
        if rank is None:
            return None
        return Classification(HandCategory.PAIR, rank)


def split_jokers(cards: Iterable[Card]) -> Tuple[List[Card], int]:
    """
    把牌分成标准牌和鬼牌.

    Args:
        cards: 任意牌

    Returns:
        Tuple[List[Card], int]: (标准牌列表, 鬼牌张数)
    """
    naturals = []
    joker_count = 0
    for card in cards:
        if card.is_joker():
            joker_count += 1
        else:
            naturals.append(card)
    return naturals, joker_count


def best_of_a_kind(naturals: List[Card], joker_count: int, size: int) -> Optional[Rank]:
    """
    找出能凑成size张同点数的最大点数.

    某点数的标准牌张数加上全部鬼牌不少于size即算成立.

    Args:
        naturals: 非鬼牌
        joker_count: 鬼牌数
        size: 需要的同点数张数

    Returns:
        Optional[Rank]: 成立的最大点数，没有时为None
    """
    counts = Counter(card.rank for card in naturals)
    qualifying = [rank for rank, count in counts.items() if count + joker_count >= size]
    if not qualifying:
        return None
    return max(qualifying)


def straight_high_rank(naturals: List[Card], joker_count: int) -> Optional[Rank]:
    """
    顺子检查，返回顺子的最大点数.

    从大到小依次以每个标准牌点数作为顺子的最小张，向上补齐4个点数，
    缺的点数用鬼牌顶替，超过A则该起点失败. 第一个成功的起点即为最大的顺子.
    都不成功时再检查 A-2-3-4-5.

    Args:
        naturals: 非鬼牌
        joker_count: 可用鬼牌数

    Returns:
        Optional[Rank]: 顺子的最大点数，A-2-3-4-5为5，不成立时为None
    """
    present = {card.rank for card in naturals}

    for anchor in sorted(present, reverse=True):
        if anchor + 4 > Rank.ACE:
            continue
        jokers_left = joker_count
        for step in range(1, 5):
            if Rank(anchor + step) in present:
                continue
            if jokers_left == 0:
                break
            jokers_left -= 1
        else:
            return Rank(anchor + 4)

    missing = sum(1 for rank in WHEEL_RANKS if rank not in present)
    if missing <= joker_count:
        return Rank.FIVE
    return None
