"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "int_dtype": "int64",  # 操作数/结果的定宽整数类型，至少建议64位
    "overflow": "wrap",  # wrap: 补码回绕；error: 抛出 IntegerOverflow
    "enforce_grouping": False,  # 括号默认只提示，不参与分组
}

# 输出参数
OUTPUT_CONFIG = {
    "echo_parentheses": True,  # 打印 "'(' is an open parenthesis" 等提示行
    "strict_arithmetic": False,  # 除零等运算错误打印后终止进程
}

# 日志参数（日志写到stderr，stdout只输出结果）
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

SUPPORTED_INT_DTYPES = ("int32", "int64")
SUPPORTED_OVERFLOW_MODES = ("wrap", "error")


# 验证配置
def validate_config(evaluator_config=None):
    """验证配置的合理性"""
    cfg = EVALUATOR_CONFIG if evaluator_config is None else evaluator_config
    assert cfg["int_dtype"] in SUPPORTED_INT_DTYPES, f"不支持的整数类型: {cfg['int_dtype']}"
    assert cfg["overflow"] in SUPPORTED_OVERFLOW_MODES, f"不支持的溢出策略: {cfg['overflow']}"
    assert isinstance(cfg["enforce_grouping"], bool), "enforce_grouping 必须是布尔值"
    return True
