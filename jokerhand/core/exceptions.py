"""
抽牌与牌型评估的业务异常定义.

业务异常统一继承JokerHandError向上抛出，由调用方（服务层或CLI）决定如何展示.
参数类型或取值错误仍使用内置的TypeError/ValueError.
"""


class JokerHandError(Exception):
    """抽牌工具基础异常类"""
    pass


class InsufficientCardsError(JokerHandError):
    """
    牌组总数不足以完成抽牌.

    即使把弃牌堆洗回牌组后，剩余牌数仍小于请求数量时抛出.

    Attributes:
        requested: 请求抽取的张数
        available: 洗回弃牌后牌组中的总张数
    """

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot draw {requested} cards, deck only holds {available}"
        )
