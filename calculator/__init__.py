"""计算器模块 - 表达式求值流水线"""
from .evaluator import ExpressionCalculator, calculate

__all__ = ['ExpressionCalculator', 'calculate']
