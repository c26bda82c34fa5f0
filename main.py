"""主程序入口 - 计算命令行中给出的中缀表达式"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, OUTPUT_CONFIG, validate_config
from calculator import calculate
from core import CalculatorError, InputError
from utils import format_result, format_error

logger = logging.getLogger(__name__)


def build_arg_parser():
    parser = argparse.ArgumentParser(description="Evaluate an infix arithmetic expression")
    parser.add_argument(
        "expression",
        nargs="?",
        default=None,
        help="Expression to evaluate, e.g. \"(2 + 3) * 4\""
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every pipeline stage at DEBUG level"
    )
    return parser


def main(args):
    """
    Returns:
        进程退出码：成功0，失败1
    """
    try:
        if args.expression is None:
            raise InputError(OUTPUT_CONFIG["missing_expression_message"])
        result = calculate(args.expression)
    except CalculatorError as e:
        logger.error(format_error(e))
        return 1

    print(format_result(result))
    return 0


def cli(argv=None):
    args = build_arg_parser().parse_args(argv)

    # 设置日志
    level = LOGGING_CONFIG["verbose_level"] if args.verbose else LOGGING_CONFIG["level"]
    logging.basicConfig(level=level, format=LOGGING_CONFIG["format"])
    validate_config()

    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
