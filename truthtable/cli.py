import argparse
import logging
import sys

from .expression import get_variables
from .logic import print_truth_table
from .parser import ParseError, Parser

logger = logging.getLogger(__name__)


def build_argparser():
    p = argparse.ArgumentParser(
        prog="truthtable",
        description="Print the truth table of a boolean expression",
    )
    p.add_argument(
        "expression",
        nargs="*",
        help="expression to evaluate, read from stdin when omitted",
    )
    p.add_argument(
        "--no-trailing",
        action="store_true",
        help="reject tokens left over after a complete expression",
    )
    p.add_argument(
        "--binary-result",
        action="store_true",
        help="print the result column as 1/0 like the inputs",
    )
    p.add_argument(
        "--frame", action="store_true", help="print the table as a pandas dataframe"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def read_expression(args, stdin):
    if args.expression:
        return " ".join(args.expression)
    print("Enter a boolean expression:")
    line = stdin.readline()
    if not line:
        return None
    return line


def run(args, stdin=None):
    text = read_expression(args, stdin or sys.stdin)
    if text is None:
        print("Invalid expression.")
        return 1

    parser = Parser(allow_trailing=not args.no_trailing)
    try:
        tokens = parser.tokenize(text)
        print(f"Tokens: {[text[t.start : t.end] for t in tokens]}")
        ast = parser.parse_tokens(tokens)
        print(f"Parse Tree: {ast}")
        variables = get_variables(ast)
        print(f"Variables: {variables}")

        print_truth_table(
            ast, variables, binary_result=args.binary_result, frame=args.frame
        )
    except ParseError as e:
        logger.debug("parse failed %s", e)
        print(f"Parsing Error: {e.err}")
        return 1
    except Exception:
        logger.debug("unexpected failure", exc_info=True)
        print("An unexpected error occurred.")
        return 1
    return 0


def main(argv=None):
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return run(args)
