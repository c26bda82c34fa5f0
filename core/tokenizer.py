"""core/tokenizer.py - 把原始字符串切分为中缀Token序列"""
import logging

from config.config import PARSER_CONFIG
from core.errors import ExpressionSyntaxError, NumberFormatError
from core.token_system import Token, Operator, format_tokens

logger = logging.getLogger(__name__)

# 单字符即可确定的Token
SIMPLE_TOKENS = {
    '(': lambda pos: Token.bracket(True, pos),
    ')': lambda pos: Token.bracket(False, pos),
    '*': lambda pos: Token.operator(Operator.MUL, pos),
    '/': lambda pos: Token.operator(Operator.DIV, pos),
    '^': lambda pos: Token.operator(Operator.POW, pos),
}


def _is_digit(ch):
    return '0' <= ch <= '9'


def _is_number_char(ch):
    return _is_digit(ch) or ch == '.'


class Tokenizer:
    """从左到右扫描，维护一个从1开始的字节游标用于报错"""

    def __init__(self, source, unary_plus_heuristic=None):
        self.source = source
        self.pointer = 0      # 字符下标
        self.byte_offset = 0  # 已扫描的字节数
        self.tokens = []
        if unary_plus_heuristic is None:
            unary_plus_heuristic = PARSER_CONFIG["unary_plus_heuristic"]
        self.unary_plus_heuristic = unary_plus_heuristic

    @classmethod
    def tokenize(cls, source, unary_plus_heuristic=None):
        """
        Args:
            source: 表达式字符串
            unary_plus_heuristic: None时读取PARSER_CONFIG
        Returns:
            Token列表（按源码顺序）
        """
        tokenizer = cls(source, unary_plus_heuristic)
        while tokenizer.pointer < len(source):
            tokenizer._read()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Tokens: {format_tokens(tokenizer.tokens)}")
        return tokenizer.tokens

    @property
    def position(self):
        return self.byte_offset + 1

    def _advance(self, count=1):
        for ch in self.source[self.pointer:self.pointer + count]:
            self.byte_offset += len(ch.encode('utf-8'))
        self.pointer += count

    def _peek(self, ahead=1):
        index = self.pointer + ahead
        if index < len(self.source):
            return self.source[index]
        return None

    def _read(self):
        ch = self.source[self.pointer]

        if ch.isspace():
            self._advance()
        elif ch in SIMPLE_TOKENS:
            self.tokens.append(SIMPLE_TOKENS[ch](self.position))
            self._advance()
        elif ch == '+':
            self._handle_add()
        elif ch == '-':
            self._handle_sub()
        elif _is_digit(ch):
            self._handle_number()
        else:
            raise ExpressionSyntaxError(f"unrecognized input `{ch}`", char=ch, position=self.position)

    def _handle_add(self):
        next_ch = self._peek()
        # 紧跟非空白字符的 '+' 视为一元正号，直接丢弃
        if self.unary_plus_heuristic and next_ch is not None and not next_ch.isspace():
            self._advance()
            return
        self.tokens.append(Token.operator(Operator.ADD, self.position))
        self._advance()

    def _handle_sub(self):
        next_ch = self._peek()
        position = self.position
        if next_ch is None or next_ch.isspace():
            self.tokens.append(Token.operator(Operator.SUB, position))
        elif _is_digit(next_ch) or next_ch == '(':
            # 一元负号改写为 (-1) * X
            self.tokens.append(Token.number(-1.0, position))
            self.tokens.append(Token.operator(Operator.MUL, position))
        else:
            raise ExpressionSyntaxError("invalid operand sequence", char=next_ch, position=position)
        self._advance()

    def _handle_number(self):
        end = self.pointer + 1
        while end < len(self.source) and _is_number_char(self.source[end]):
            end += 1
        literal = self.source[self.pointer:end]
        try:
            value = float(literal)
        except ValueError:
            raise NumberFormatError(f"cannot parse number `{literal}`", char=literal,
                                    position=self.position) from None
        self.tokens.append(Token.number(value, self.position))
        self._advance(end - self.pointer)
