"""core/operators.py"""
import numpy as np

from core.token_system import Operator


class Operators:
    """所有二元操作符的静态方法集合

    统一在 float64 上计算并忽略浮点异常：除零得到 inf/nan，
    溢出得到 inf，负数开分数次方得到 nan，都不抛异常。
    """

    @staticmethod
    def _to_float64(operand1, operand2):
        return np.float64(operand1), np.float64(operand2)

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        x, y = Operators._to_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return float(np.add(x, y))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        x, y = Operators._to_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return float(np.subtract(x, y))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        x, y = Operators._to_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return float(np.multiply(x, y))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，除零按IEEE-754返回 ±inf 或 nan"""
        x, y = Operators._to_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return float(np.divide(x, y))

    @staticmethod
    def pow(operand1, operand2):
        """乘方操作符"""
        x, y = Operators._to_float64(operand1, operand2)
        with np.errstate(all='ignore'):
            return float(np.power(x, y))

    @staticmethod
    def apply(op, operand1, operand2):
        op_method = OPERATOR_METHODS.get(op)
        if op_method is None:
            raise ValueError(f"Unknown binary operator: {op}")
        return op_method(operand1, operand2)


OPERATOR_METHODS = {
    Operator.ADD: Operators.add,
    Operator.SUB: Operators.sub,
    Operator.MUL: Operators.mul,
    Operator.DIV: Operators.div,
    Operator.POW: Operators.pow,
}
