"""表达式树求值器 - 调用统一的Operators类"""
import logging

from core.expression import Literal, BinaryOp, iter_postorder
from core.operators import Operators

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """按后序遍历用值栈求值表达式树，无内部状态"""

    @staticmethod
    def evaluate(expression):
        """
        Args:
            expression: 表达式树根节点（Literal或BinaryOp）
        Returns:
            float结果；除零等情况返回inf/nan而不是报错
        """
        stack = []
        for node in iter_postorder(expression):
            if isinstance(node, Literal):
                stack.append(node.value)
            elif isinstance(node, BinaryOp):
                # 后入栈的是右操作数
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.append(Operators.apply(node.op, operand1, operand2))
            else:
                raise TypeError(f"Unsupported expression node: {type(node).__name__}")
        return stack.pop()
