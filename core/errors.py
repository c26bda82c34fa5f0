"""core/errors.py - 结构化错误类型"""
from enum import Enum


class ErrorKind(Enum):
    SYNTAX = "syntax"
    NUMBER_FORMAT = "number_format"
    STRUCTURAL = "structural"
    INPUT = "input"


class CalculatorError(Exception):
    """所有计算错误的基类

    Args:
        message: 可读的错误描述
        char: 出错的字符或字面量（可选）
        position: 源字符串中的字节偏移，从1开始（可选）
    """
    kind = None

    def __init__(self, message, char=None, position=None):
        super().__init__(message)
        self.message = message
        self.char = char
        self.position = position

    def to_dict(self):
        return {
            'kind': self.kind.value if self.kind else None,
            'message': self.message,
            'char': self.char,
            'position': self.position,
        }

    def __str__(self):
        if self.position is not None:
            return f"{self.message} at position {self.position}"
        return self.message


class ExpressionSyntaxError(CalculatorError):
    """无法识别的字符、非法的操作数序列、括号不匹配"""
    kind = ErrorKind.SYNTAX


class UnmatchedBracketError(ExpressionSyntaxError):
    pass


class NumberFormatError(CalculatorError):
    kind = ErrorKind.NUMBER_FORMAT


class StructuralError(CalculatorError):
    """操作数不足，或者表达式栈最终不是恰好一个节点"""
    kind = ErrorKind.STRUCTURAL


class InputError(CalculatorError):
    kind = ErrorKind.INPUT
