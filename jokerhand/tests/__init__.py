"""jokerhand 测试包"""
