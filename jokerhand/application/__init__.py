"""
应用层 - 把牌组和评估器组合成抽牌评估服务，供UI层调用.
"""

from .hand_service import DrawnHand, HandService

__all__ = ['DrawnHand', 'HandService']
