"""配置文件"""
import logging

# 解析参数
PARSER_CONFIG = {
    # '+' 后面紧跟非空白字符时视为一元正号并丢弃（保持原始行为）
    "unary_plus_heuristic": True,
    # 右结合的操作符符号；为空时所有操作符左结合，2^3^2 = 64
    "right_associative": [],
}

# 命令行输出
OUTPUT_CONFIG = {
    "result_prefix": "[INFO] result: ",
    "missing_expression_message": "where is string to parse",
}

# 日志
LOGGING_CONFIG = {
    "level": logging.WARNING,
    "verbose_level": logging.DEBUG,
    "format": "[%(levelname)s] %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core.token_system import SYMBOL_TO_OPERATOR

    assert isinstance(PARSER_CONFIG["unary_plus_heuristic"], bool), "unary_plus_heuristic 必须是布尔值"
    for symbol in PARSER_CONFIG["right_associative"]:
        assert symbol in SYMBOL_TO_OPERATOR, f"未知的操作符: {symbol}"
    assert LOGGING_CONFIG["format"], "日志格式不能为空"
    logging.getLogger(__name__).debug("Configuration validated successfully!")
