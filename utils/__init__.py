"""工具模块"""
from .formatting import format_value, format_result, format_error

__all__ = ['format_value', 'format_result', 'format_error']
