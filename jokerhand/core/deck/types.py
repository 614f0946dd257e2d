"""
扑克牌组相关类型定义.

定义花色、点数、鬼牌颜色和显示格式等基础枚举类型，以及鬼牌的排序哨兵值.
"""

from enum import Enum, IntEnum
from typing import Dict, List


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    数值即花色序号（从1开始），顺序为 梅花 < 方块 < 红桃 < 黑桃.
    花色只用于同花分组和平局时的次要排序.
    """

    CLUBS = 1         # 梅花
    DIAMONDS = 2      # 方块
    HEARTS = 3        # 红桃
    SPADES = 4        # 黑桃

    @property
    def display_name(self) -> str:
        """花色的英文全称，如"Spades"."""
        return self.name.title()

    @property
    def initial(self) -> str:
        """花色首字母，如"S"."""
        return self.name[0]


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    数值越大表示点数越大，A固定为最大点数.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def index(self) -> int:
        """点数在 2..A 序列中的位置（从0开始）."""
        return self.value - Rank.TWO.value

    @property
    def display_name(self) -> str:
        """点数的显示名称，数字牌为数字，人头牌为英文全称."""
        return _RANK_NAMES.get(self, str(self.value))

    @property
    def abbreviation(self) -> str:
        """点数的简写，如"10"、"J"、"A"."""
        if self >= Rank.JACK:
            return self.display_name[0]
        return str(self.value)


class JokerColor(Enum):
    """鬼牌颜色，仅用于显示."""

    RED = "Red"
    BLACK = "Black"

    @property
    def initial(self) -> str:
        return self.value[0]


class DisplayForm(Enum):
    """卡牌显示格式."""

    LONG = "long"
    SHORT = "short"


_RANK_NAMES: Dict[Rank, str] = {
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
    Rank.ACE: "Ace",
}

# 鬼牌没有点数和花色，排序时放在A之后、黑桃之后
JOKER_RANK_VALUE = 14
JOKER_SUIT_VALUE = len(Suit) + 1


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按花色序号升序排列的四种花色
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从2到A升序排列的13种点数
    """
    return list(Rank)

