"""表达式计算流水线"""
import logging

from core import (
    Tokenizer, ShuntingYardConverter, ExpressionBuilder, ExpressionEvaluator, InputError
)

logger = logging.getLogger(__name__)


class ExpressionCalculator:
    """串联 分词 -> 调度场 -> 建树 -> 求值，任一阶段出错立即中止"""

    def __init__(self, unary_plus_heuristic=None, right_associative=None):
        # None 表示使用 config.config.PARSER_CONFIG 中的设置
        self.unary_plus_heuristic = unary_plus_heuristic
        self.right_associative = right_associative

    def parse(self, expression):
        """
        Args:
            expression: 中缀表达式字符串
        Returns:
            表达式树根节点
        """
        if not isinstance(expression, str):
            raise InputError(f"expression must be a string, got {type(expression).__name__}")

        tokens = Tokenizer.tokenize(expression, unary_plus_heuristic=self.unary_plus_heuristic)
        postfix = ShuntingYardConverter.convert(tokens, right_associative=self.right_associative)
        return ExpressionBuilder.build(postfix)

    def evaluate(self, expression):
        tree = self.parse(expression)
        result = ExpressionEvaluator.evaluate(tree)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Evaluated '{expression}' = {result!r}")
        return result


def calculate(expression):
    """计算中缀表达式，返回float；出错时抛出CalculatorError"""
    return ExpressionCalculator().evaluate(expression)
