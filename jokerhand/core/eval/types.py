"""
牌型评估相关类型定义.

定义牌型等级和评估结果. 评估结果保留结构化字段，显示文本由字段推导.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from ..deck.types import Rank, Suit


class HandCategory(IntEnum):
    """
    牌型枚举.

    数值越大表示牌型越强. 皇家同花顺单独列出，便于显示.
    """

    NOTHING = 1            # 无牌型
    PAIR = 2               # 一对
    TWO_PAIR = 3           # 两对
    THREE_OF_A_KIND = 4    # 三条
    STRAIGHT = 5           # 顺子
    FLUSH = 6              # 同花
    FULL_HOUSE = 7         # 葫芦
    FOUR_OF_A_KIND = 8     # 四条
    STRAIGHT_FLUSH = 9     # 同花顺
    ROYAL_FLUSH = 10       # 皇家同花顺


def plural(rank: Rank) -> str:
    """点数的复数写法，如"Kings"、"7s"."""
    return f"{rank.display_name}s"


@dataclass(frozen=True)
class Classification:
    """
    牌型评估结果.

    Attributes:
        category: 牌型等级
        primary_rank: 主要点数（如四条、三条、对子的点数，顺子的最大点数，
            葫芦中三张的点数，两对中较大的一对）
        secondary_rank: 次要点数（葫芦中对子的点数，两对中较小的一对）
        suit: 同花或同花顺的花色

    Examples:
        >>> Classification(HandCategory.FOUR_OF_A_KIND, Rank.KING).label
        'Four Kings'
        >>> str(Classification(HandCategory.FLUSH, suit=Suit.SPADES))
        'Flush of Spades'
    """

    category: HandCategory
    primary_rank: Optional[Rank] = None
    secondary_rank: Optional[Rank] = None
    suit: Optional[Suit] = None

    def __post_init__(self) -> None:
        """
        验证评估结果的有效性.

        Raises:
            TypeError: 当牌型等级类型无效时
            ValueError: 当牌型缺少显示所需的点数或花色时
        """
        if not isinstance(self.category, HandCategory):
            raise TypeError(f"牌型等级必须是HandCategory类型，实际: {type(self.category)}")

        needs_primary = {
            HandCategory.PAIR, HandCategory.TWO_PAIR, HandCategory.THREE_OF_A_KIND,
            HandCategory.STRAIGHT, HandCategory.FULL_HOUSE, HandCategory.FOUR_OF_A_KIND,
        }
        needs_secondary = {HandCategory.TWO_PAIR, HandCategory.FULL_HOUSE}
        needs_suit = {HandCategory.FLUSH, HandCategory.STRAIGHT_FLUSH, HandCategory.ROYAL_FLUSH}

        if self.category in needs_primary and self.primary_rank is None:
            raise ValueError(f"{self.category.name}缺少主要点数")
        if self.category in needs_secondary and self.secondary_rank is None:
            raise ValueError(f"{self.category.name}缺少次要点数")
        if self.category in needs_suit and self.suit is None:
            raise ValueError(f"{self.category.name}缺少花色")

    @property
    def label(self) -> str:
        """牌型的英文描述，如"Full house, Kings over 5s"."""
        category = self.category
        if category == HandCategory.ROYAL_FLUSH:
            return f"Royal Flush of {self.suit.display_name}"
        if category == HandCategory.STRAIGHT_FLUSH:
            return f"Straight Flush of {self.suit.display_name}"
        if category == HandCategory.FOUR_OF_A_KIND:
            return f"Four {plural(self.primary_rank)}"
        if category == HandCategory.FULL_HOUSE:
            return f"Full house, {plural(self.primary_rank)} over {plural(self.secondary_rank)}"
        if category == HandCategory.FLUSH:
            return f"Flush of {self.suit.display_name}"
        if category == HandCategory.STRAIGHT:
            return f"{self.primary_rank.display_name} high straight"
        if category == HandCategory.THREE_OF_A_KIND:
            return f"Three {plural(self.primary_rank)}"
        if category == HandCategory.TWO_PAIR:
            return f"Two pair, {plural(self.primary_rank)} and {plural(self.secondary_rank)}"
        if category == HandCategory.PAIR:
            return f"Pair of {plural(self.primary_rank)}"
        return "Nothing!"

    def __str__(self) -> str:
        return self.label
