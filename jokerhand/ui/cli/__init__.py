"""
命令行界面.

提供click命令组（draw / evaluate / play）和纯函数渲染器.
"""

from .cli_app import cli, main
from .render import CLIRenderer

__all__ = ['cli', 'main', 'CLIRenderer']
