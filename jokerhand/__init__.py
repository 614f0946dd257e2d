"""
jokerhand - 带鬼牌的抽牌与牌型评估工具

从一副（可带两张鬼牌的）扑克牌中抽出任意张数，自动评估能组成的最好5张牌型.

Modules:
    core.deck: 扑克牌和牌组
    core.eval: 带万能牌的牌型评估
    application: 抽牌评估服务
    ui.cli: 命令行界面
"""

from .core.deck import Card, Deck
from .core.eval import Classification, HandCategory, HandEvaluator
from .core.exceptions import InsufficientCardsError, JokerHandError

__version__ = "1.0.0"

__all__ = [
    'Card', 'Deck',
    'Classification', 'HandCategory', 'HandEvaluator',
    'InsufficientCardsError', 'JokerHandError',
]
