"""
剪刀石头布游戏
Rock Scissors Paper Game
"""
__version__ = "1.0.0"
