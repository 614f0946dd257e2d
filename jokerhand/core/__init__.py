"""
核心模块 - 纯领域逻辑层

核心模块只依赖其他核心模块，不依赖应用层或UI层.

Modules:
    deck: 扑克牌和牌组管理
    eval: 牌型评估
    config: 牌组和日志配置
    exceptions: 业务异常
"""
