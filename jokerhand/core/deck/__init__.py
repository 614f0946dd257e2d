"""
扑克牌组管理模块.

提供Card和Deck类，实现扑克牌的基本操作和抽牌/弃牌管理.
"""

from .card import Card
from .deck import Deck
from .types import DisplayForm, JokerColor, Rank, Suit

__all__ = ['Card', 'Deck', 'DisplayForm', 'JokerColor', 'Rank', 'Suit']
