"""
测试配置 - pytest配置文件

提供通用fixture：
- 从短格式字符串批量造牌
- 固定种子的牌组
- 评估器实例
"""

import random
from typing import Callable, List

import pytest

from jokerhand.core.deck import Card, Deck
from jokerhand.core.eval import HandEvaluator


def parse_cards(text: str) -> List[Card]:
    """把空格分隔的短格式字符串解析成牌列表，如"10S JS Jk(R)"."""
    return [Card.from_str(token) for token in text.split()]


@pytest.fixture
def make_cards() -> Callable[[str], List[Card]]:
    """造牌fixture"""
    return parse_cards


@pytest.fixture
def evaluator() -> HandEvaluator:
    """评估器fixture"""
    return HandEvaluator()


@pytest.fixture
def seeded_deck() -> Deck:
    """固定种子、不带鬼牌的牌组"""
    return Deck(rng=random.Random(42))


@pytest.fixture
def seeded_joker_deck() -> Deck:
    """固定种子、带两张鬼牌的牌组"""
    return Deck(jokers=True, rng=random.Random(42))


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "unit: 标记单元测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
