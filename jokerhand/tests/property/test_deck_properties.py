"""
Property-based Tests for Deck - 牌组守恒属性测试

使用hypothesis对任意的洗牌/抽牌操作序列验证：
- 抽牌堆与弃牌堆张数之和始终等于整副牌
- 两堆合起来始终恰好是构造时的那副牌，不增不减不重复
- 抽出的手牌总是按点数升序
"""

import random
from collections import Counter

import pytest
from hypothesis import given, settings, strategies as st

from jokerhand.core.deck import Deck
from jokerhand.core.exceptions import InsufficientCardsError

SHUFFLE = "shuffle"

# 操作：洗牌或抽n张（可能超过整副牌）
operation_strategy = st.one_of(st.just(SHUFFLE), st.integers(min_value=1, max_value=60))


@pytest.mark.property_test
@settings(max_examples=100, deadline=None)
@given(
    jokers=st.booleans(),
    seed=st.integers(min_value=0, max_value=2**32 - 1),
    operations=st.lists(operation_strategy, max_size=30),
)
def test_card_conservation_property(jokers, seed, operations):
    """Property test: 任意操作序列后牌的总数和组成都不变"""
    deck = Deck(jokers=jokers, rng=random.Random(seed))
    universe = Counter(deck.draw_pile)
    total = 54 if jokers else 52

    for operation in operations:
        if operation == SHUFFLE:
            deck.shuffle()
        else:
            try:
                hand = deck.draw(operation)
            except InsufficientCardsError:
                assert operation > total
            else:
                assert len(hand) == operation
                values = [card.rank_value() for card in hand]
                assert values == sorted(values)

        assert len(deck.draw_pile) + len(deck.discard_pile) == total
        assert Counter(deck.draw_pile) + Counter(deck.discard_pile) == universe


@pytest.mark.property_test
@settings(max_examples=50, deadline=None)
@given(seed=st.integers(min_value=0, max_value=2**32 - 1), count=st.integers(min_value=1, max_value=54))
def test_seeded_draw_is_reproducible(seed, count):
    """Property test: 相同种子相同操作得到相同手牌"""
    deck1 = Deck(jokers=True, rng=random.Random(seed))
    deck2 = Deck(jokers=True, rng=random.Random(seed))
    deck1.shuffle()
    deck2.shuffle()

    assert deck1.draw(count) == deck2.draw(count)
