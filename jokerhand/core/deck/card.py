"""
扑克牌数据结构.

定义不可变的Card类. 一张牌要么是带点数和花色的标准牌，要么是只带颜色的鬼牌（万能牌）.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .types import (
    DisplayForm,
    JokerColor,
    JOKER_RANK_VALUE,
    JOKER_SUIT_VALUE,
    Rank,
    Suit,
)


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类. 标准牌需要花色和点数；鬼牌只有颜色，颜色仅用于显示.

    Attributes:
        suit: 花色，鬼牌为None
        rank: 点数，鬼牌为None
        color: 鬼牌颜色，标准牌为None

    Examples:
        >>> card = Card(Suit.SPADES, Rank.ACE)
        >>> card.display()
        'Ace of Spades'
        >>> Card.joker(JokerColor.RED).display(DisplayForm.SHORT)
        'Jk(R)'
    """

    suit: Optional[Suit] = None
    rank: Optional[Rank] = None
    color: Optional[JokerColor] = None

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色、点数或颜色类型无效时
            ValueError: 当鬼牌同时指定了花色或点数时
        """
        if self.color is not None:
            if not isinstance(self.color, JokerColor):
                raise TypeError(f"鬼牌颜色必须是JokerColor类型，实际: {type(self.color)}")
            if self.suit is not None or self.rank is not None:
                raise ValueError("鬼牌不能指定花色或点数")
            return

        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")

    @classmethod
    def joker(cls, color: JokerColor) -> 'Card':
        """创建指定颜色的鬼牌."""
        return cls(color=color)

    def is_joker(self) -> bool:
        """是否为鬼牌."""
        return self.color is not None

    def rank_value(self) -> int:
        """
        点数在 2..A 序列中的位置.

        Returns:
            int: 2为0，A为12；鬼牌固定为14，排在所有标准牌之后
        """
        if self.rank is None:
            return JOKER_RANK_VALUE
        return self.rank.index

    def suit_value(self) -> int:
        """
        花色序号.

        Returns:
            int: 梅花为1，黑桃为4；鬼牌固定为5
        """
        if self.suit is None:
            return JOKER_SUIT_VALUE
        return self.suit.value

    def display(self, form: DisplayForm = DisplayForm.LONG) -> str:
        """
        返回扑克牌的显示文本.

        Args:
            form: 显示格式. LONG为"10 of Spades"/"Red Joker"，
                SHORT为"10S"/"Jk(R)"

        Returns:
            str: 显示文本
        """
        if self.color is not None:
            if form is DisplayForm.SHORT:
                return f"Jk({self.color.initial})"
            return f"{self.color.value} Joker"

        if form is DisplayForm.SHORT:
            return f"{self.rank.abbreviation}{self.suit.initial}"
        return f"{self.rank.display_name} of {self.suit.display_name}"

    def __str__(self) -> str:
        return self.display(DisplayForm.LONG)

    def __repr__(self) -> str:
        if self.color is not None:
            return f"Card(JOKER, {self.color.name})"
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从短格式字符串创建扑克牌对象.

        Args:
            card_str: 扑克牌字符串，如"AS"、"10h"、"Th"、"Jk(R)"、"JkB"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            ValueError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        text = card_str.strip().upper()
        if len(text) < 2:
            raise ValueError(f"卡牌字符串格式错误: {card_str}")

        if text.startswith("JK"):
            color_str = text[2:].strip("()")
            color_map: Dict[str, JokerColor] = {
                "R": JokerColor.RED, "RED": JokerColor.RED,
                "B": JokerColor.BLACK, "BLACK": JokerColor.BLACK,
            }
            if color_str not in color_map:
                raise ValueError(f"无效的鬼牌颜色: {card_str}")
            return cls.joker(color_map[color_str])

        # 处理10的特殊情况
        if text.startswith("10"):
            rank_str, suit_str = "10", text[2:]
        else:
            rank_str, suit_str = text[0], text[1:]

        rank_map: Dict[str, Rank] = {
            "2": Rank.TWO, "3": Rank.THREE, "4": Rank.FOUR, "5": Rank.FIVE,
            "6": Rank.SIX, "7": Rank.SEVEN, "8": Rank.EIGHT, "9": Rank.NINE,
            "10": Rank.TEN, "T": Rank.TEN, "J": Rank.JACK, "Q": Rank.QUEEN,
            "K": Rank.KING, "A": Rank.ACE
        }
        suit_map: Dict[str, Suit] = {suit.initial: suit for suit in Suit}

        if rank_str not in rank_map:
            raise ValueError(f"无效的点数: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"无效的花色: {suit_str}")

        return cls(suit_map[suit_str], rank_map[rank_str])

    def __lt__(self, other: 'Card') -> bool:
        """按点数位置比较，鬼牌最大."""
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank_value() < other.rank_value()
