"""核心模块 - Token系统、分词器、调度场转换、表达式树和求值器"""
from .token_system import (
    Operator, TokenType, Token, PostfixToken,
    OPERATOR_PRECEDENCE, SYMBOL_TO_OPERATOR, op_priority
)
from .errors import (
    ErrorKind, CalculatorError, ExpressionSyntaxError, UnmatchedBracketError,
    NumberFormatError, StructuralError, InputError
)
from .tokenizer import Tokenizer
from .shunting_yard import ShuntingYardConverter
from .expression import Expression, Literal, BinaryOp, ExpressionBuilder
from .operators import Operators
from .evaluator import ExpressionEvaluator

__all__ = [
    'Operator', 'TokenType', 'Token', 'PostfixToken',
    'OPERATOR_PRECEDENCE', 'SYMBOL_TO_OPERATOR', 'op_priority',
    'ErrorKind', 'CalculatorError', 'ExpressionSyntaxError', 'UnmatchedBracketError',
    'NumberFormatError', 'StructuralError', 'InputError',
    'Tokenizer', 'ShuntingYardConverter',
    'Expression', 'Literal', 'BinaryOp', 'ExpressionBuilder',
    'Operators', 'ExpressionEvaluator'
]
