"""主程序入口 - 逐行读取中缀表达式并输出结果"""
import argparse
import logging
import sys

from config.config import *
from core import InfixEvaluator

logger = logging.getLogger(__name__)


def setup_logging(level):
    # 日志走stderr，避免混入stdout的结果行
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format=LOGGING_CONFIG['format'],
        stream=sys.stderr
    )


def build_evaluator_config(args):
    """命令行参数覆盖 EVALUATOR_CONFIG"""
    cfg = dict(EVALUATOR_CONFIG)
    if args.int_dtype is not None:
        cfg['int_dtype'] = args.int_dtype
    if args.overflow is not None:
        cfg['overflow'] = args.overflow
    if args.enforce_grouping:
        cfg['enforce_grouping'] = True
    validate_config(cfg)
    return cfg


def run(evaluator, lines, out, echo_parentheses=True, strict_arithmetic=False):
    """
    对每一行求值并写出结果
    Args:
        evaluator: InfixEvaluator
        lines: 可迭代的文本行
        out: 输出流
        echo_parentheses: 是否输出括号提示行
        strict_arithmetic: 运算错误输出后是否抛出（终止读取循环）
    Returns:
        (成功行数, 失败行数)
    """
    succeeded, failed = 0, 0
    for evaluation in evaluator.evaluate_lines(lines):
        for text in evaluation.render(include_notices=echo_parentheses):
            out.write(text + "\n")
        out.flush()

        if evaluation.ok:
            succeeded += 1
            continue
        failed += 1
        if strict_arithmetic and evaluation.kind == 'arithmetic':
            raise evaluation.error
    return succeeded, failed


def main(args):
    setup_logging(args.log_level)
    cfg = build_evaluator_config(args)
    logger.info(f"Starting infix calculator: {cfg}")

    evaluator = InfixEvaluator.from_config(cfg)
    echo_parentheses = OUTPUT_CONFIG['echo_parentheses'] and not args.quiet_parentheses
    strict_arithmetic = OUTPUT_CONFIG['strict_arithmetic'] or args.strict_arithmetic

    if args.input_path:
        with open(args.input_path, 'r', encoding='utf-8') as f:
            succeeded, failed = run(evaluator, f, sys.stdout, echo_parentheses, strict_arithmetic)
    else:
        succeeded, failed = run(evaluator, sys.stdin, sys.stdout, echo_parentheses, strict_arithmetic)

    logger.info(f"Finished: {succeeded} evaluated, {failed} failed")
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Infix integer expression calculator")

    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="Read expressions from this file instead of standard input"
    )
    parser.add_argument(
        "--enforce_grouping",
        action="store_true",
        help="Make parentheses group sub-expressions (by default they are only reported)"
    )
    parser.add_argument(
        "--overflow",
        type=str,
        choices=SUPPORTED_OVERFLOW_MODES,
        default=None,
        help="Integer overflow policy: wrap around or report an error (default: wrap)"
    )
    parser.add_argument(
        "--int_dtype",
        type=str,
        choices=SUPPORTED_INT_DTYPES,
        default=None,
        help="Fixed-width integer type for operands and results (default: int64)"
    )
    parser.add_argument(
        "--quiet_parentheses",
        action="store_true",
        help="Do not print the open/close parenthesis notices"
    )
    parser.add_argument(
        "--strict_arithmetic",
        action="store_true",
        help="Stop at the first division by zero or overflow"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level written to stderr (default: WARNING)"
    )
    return parser.parse_args(argv)


def cli(argv=None):
    return main(parse_args(argv))


if __name__ == "__main__":
    sys.exit(cli())
