"""core/expression.py - 表达式树节点以及从后缀序列构建表达式树"""
import logging

from core.errors import StructuralError
from core.token_system import Token, TokenType

logger = logging.getLogger(__name__)


class Expression:
    """表达式树节点基类，构造后不可修改"""
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def to_rpn(self):
        """转回后缀形式的字符串，例如 '2 3 4 * +'"""
        parts = []
        for node in iter_postorder(self):
            if isinstance(node, BinaryOp):
                parts.append(node.op.symbol)
            else:
                parts.append(repr(node.value))
        return ' '.join(parts)

    def _signature(self):
        # 后序序列唯一确定一棵树
        return tuple(node.op if isinstance(node, BinaryOp) else node.value
                     for node in iter_postorder(self))

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return self._signature() == other._signature()

    def __hash__(self):
        return hash(self._signature())


class Literal(Expression):
    __slots__ = ('value',)

    def __init__(self, value):
        object.__setattr__(self, 'value', float(value))

    def __repr__(self):
        return f"Literal({self.value!r})"


class BinaryOp(Expression):
    __slots__ = ('left', 'op', 'right')

    def __init__(self, left, op, right):
        object.__setattr__(self, 'left', left)
        object.__setattr__(self, 'op', op)
        object.__setattr__(self, 'right', right)

    def __repr__(self):
        return f"BinaryOp({self.left!r}, {self.op.name}, {self.right!r})"


def iter_postorder(expression):
    """后序遍历（左、右、根），用显式栈代替递归，树的深度不受限制"""
    pending = [(expression, False)]
    while pending:
        node, expanded = pending.pop()
        if isinstance(node, BinaryOp) and not expanded:
            pending.append((node, True))
            pending.append((node.right, False))
            pending.append((node.left, False))
        else:
            yield node


class ExpressionBuilder:
    """用节点栈消费后缀序列"""

    def __init__(self):
        self.stack = []

    @classmethod
    def build(cls, postfix_tokens):
        """
        Args:
            postfix_tokens: PostfixToken序列
        Returns:
            表达式树的根节点
        """
        builder = cls()
        for token in postfix_tokens:
            builder._read(token)

        if len(builder.stack) != 1:
            logger.debug(f"Expression stack has {len(builder.stack)} nodes, expected 1")
            raise StructuralError("error parsing expression")

        expression = builder.stack.pop()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Expression: {expression.to_rpn()}")
        return expression

    def _read(self, token):
        if not isinstance(token, Token):
            raise StructuralError(f"unexpected token {token!r} in postfix stream")

        if token.type == TokenType.NUMBER:
            self.stack.append(Literal(token.value))
        elif token.type == TokenType.OPERATOR:
            if len(self.stack) < 2:
                raise StructuralError(f"unexpected operation {token.op.symbol}",
                                      char=token.op.symbol, position=token.position)
            # 后入栈的是右操作数
            right = self.stack.pop()
            left = self.stack.pop()
            self.stack.append(BinaryOp(left, token.op, right))
        else:
            raise StructuralError(f"unexpected token {token.text} in postfix stream",
                                  char=token.text, position=token.position)
