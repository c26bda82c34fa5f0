"""core/shunting_yard.py - 中缀Token序列转换为后缀（RPN）序列"""
import logging

from config.config import PARSER_CONFIG
from core.errors import UnmatchedBracketError
from core.token_system import TokenType, PostfixToken, SYMBOL_TO_OPERATOR, op_priority, format_tokens

logger = logging.getLogger(__name__)


class ShuntingYardConverter:
    """调度场算法：操作符/括号栈 + 输出序列"""

    def __init__(self, right_associative=None):
        if right_associative is None:
            right_associative = PARSER_CONFIG["right_associative"]
        self.right_associative = frozenset(
            SYMBOL_TO_OPERATOR[op] if isinstance(op, str) else op for op in right_associative
        )
        self.stack = []
        self.output = []

    @classmethod
    def convert(cls, tokens, right_associative=None):
        """
        Args:
            tokens: Tokenizer输出的Token序列
            right_associative: 右结合操作符（符号或Operator），None时读取PARSER_CONFIG
        Returns:
            PostfixToken列表
        """
        converter = cls(right_associative)
        for token in tokens:
            converter._handle(token)
        converter._clear_stack()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Postfix: {format_tokens(converter.output)}")
        return converter.output

    def _handle(self, token):
        if token.type == TokenType.NUMBER:
            self.output.append(PostfixToken.from_token(token))
        elif token.type == TokenType.BRACKET:
            if token.is_opening:
                self.stack.append(token)
            else:
                self._move_brackets_from_stack(token)
        elif token.type == TokenType.OPERATOR:
            self._push_operation(token)
        else:
            raise TypeError(f"Unknown token type: {token.type}")

    def _should_pop(self, top, pushing):
        if top.type != TokenType.OPERATOR:
            return False
        top_priority = op_priority(top.op)
        pushing_priority = op_priority(pushing.op)
        if pushing.op in self.right_associative:
            return top_priority > pushing_priority
        # 同优先级向左折叠
        return top_priority >= pushing_priority

    def _push_operation(self, token):
        while self.stack and self._should_pop(self.stack[-1], token):
            self.output.append(PostfixToken.from_token(self.stack.pop()))
        self.stack.append(token)

    def _move_brackets_from_stack(self, closing):
        while self.stack:
            top = self.stack.pop()
            if top.type == TokenType.BRACKET and top.is_opening:
                return
            self.output.append(PostfixToken.from_token(top))
        raise UnmatchedBracketError("not found pair for bracket", char=')', position=closing.position)

    def _clear_stack(self):
        while self.stack:
            top = self.stack.pop()
            if top.type == TokenType.BRACKET:
                raise UnmatchedBracketError("not found pair for bracket", char='(', position=top.position)
            self.output.append(PostfixToken.from_token(top))
