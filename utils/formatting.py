"""utils/formatting.py"""
import math

import numpy as np

from config.config import OUTPUT_CONFIG


def format_value(value):
    """float转字符串：整数不带小数点，inf/-inf/NaN 按原样输出"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(np.float64(value), trim='-')


def format_result(value):
    return f"{OUTPUT_CONFIG['result_prefix']}{format_value(value)}"


def format_error(error):
    """把CalculatorError（或其他异常）渲染成一行文本"""
    return str(error)
