"""core/token_system.py"""
from enum import Enum


class Operator(Enum):
    """二元操作符，值为源码中的符号"""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"

    @property
    def symbol(self):
        return self.value

    def __str__(self):
        return self.value


class TokenType(Enum):
    NUMBER = "number"      # 数字字面量
    BRACKET = "bracket"    # 括号（仅出现在中缀Token流中）
    OPERATOR = "operator"  # 操作符


# 优先级表：数值越大结合越紧
OPERATOR_PRECEDENCE = {
    Operator.ADD: 3,
    Operator.SUB: 3,
    Operator.MUL: 4,
    Operator.DIV: 4,
    Operator.POW: 5,
}

# 符号 -> 操作符
SYMBOL_TO_OPERATOR = {op.symbol: op for op in Operator}


def op_priority(op):
    """返回操作符的优先级"""
    return OPERATOR_PRECEDENCE[op]


class Token:
    """中缀Token

    Args:
        token_type: TokenType
        value: 数字字面量的值（NUMBER）
        is_opening: 是否为左括号（BRACKET）
        op: 操作符（OPERATOR）
        position: 在源字符串中的字节偏移（从1开始）
    """

    def __init__(self, token_type, value=None, is_opening=None, op=None, position=None):
        self.type = token_type
        self.value = value
        self.is_opening = is_opening
        self.op = op
        self.position = position

    @classmethod
    def number(cls, value, position=None):
        return cls(TokenType.NUMBER, value=float(value), position=position)

    @classmethod
    def bracket(cls, is_opening, position=None):
        return cls(TokenType.BRACKET, is_opening=is_opening, position=position)

    @classmethod
    def operator(cls, op, position=None):
        return cls(TokenType.OPERATOR, op=op, position=position)

    @property
    def text(self):
        """Token在日志中的显示形式"""
        if self.type == TokenType.NUMBER:
            return repr(self.value)
        if self.type == TokenType.BRACKET:
            return "(" if self.is_opening else ")"
        return self.op.symbol

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        # position只用于诊断，不参与比较
        return (self.type, self.value, self.is_opening, self.op) == \
               (other.type, other.value, other.is_opening, other.op)

    def __hash__(self):
        return hash((self.type, self.value, self.is_opening, self.op))

    def __repr__(self):
        return f"{type(self).__name__}({self.type.name}, {self.text}, position={self.position})"


class PostfixToken(Token):
    """后缀（RPN）Token：只有数字和操作符，不含括号"""

    @classmethod
    def bracket(cls, is_opening, position=None):
        raise TypeError("postfix streams never contain brackets")

    @classmethod
    def from_token(cls, token):
        if token.type == TokenType.NUMBER:
            return cls.number(token.value, token.position)
        if token.type == TokenType.OPERATOR:
            return cls.operator(token.op, token.position)
        raise TypeError(f"cannot convert {token!r} to a postfix token")


def format_tokens(tokens):
    """把Token序列拼成空格分隔的字符串，用于日志"""
    return ' '.join(t.text for t in tokens)
