"""
牌型评估模块.

提供HandEvaluator类和评估结果类型，鬼牌作为万能牌参与评估.
"""

from .types import Classification, HandCategory
from .evaluator import HandEvaluator

__all__ = ['Classification', 'HandCategory', 'HandEvaluator']
