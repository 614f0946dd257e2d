"""
抽牌工具配置.

DeckConfig使用Pydantic dataclass校验牌组参数；LoggingConfig负责日志输出格式和级别.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import Field
from pydantic.dataclasses import dataclass as pydantic_dataclass


@pydantic_dataclass(frozen=True)
class DeckConfig:
    """
    牌组配置.

    Attributes:
        jokers: 是否加入红、黑两张鬼牌
        seed: 洗牌随机种子，None表示不固定
    """
    jokers: bool = Field(False, description="是否加入两张鬼牌")
    seed: Optional[int] = Field(None, ge=0, description="洗牌随机种子")


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        """验证日志级别"""
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {self.log_level}")


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    按配置初始化根日志.

    Args:
        config: 日志配置，None时使用默认配置
    """
    config = config or LoggingConfig()
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=config.log_format,
    )
