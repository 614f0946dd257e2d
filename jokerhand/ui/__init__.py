"""
UI层 - 调用应用层服务并展示结果，不包含任何牌型判断逻辑.
"""
