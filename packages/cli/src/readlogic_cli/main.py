"""
Command line interface for ReadLogic

Usage:
    readlogic parse <kb_file> [--reformat] [--multiline]
    readlogic reformat [text] [--multiline]
    readlogic check <expression> --as atom
"""

import argparse
import logging
import sys
from typing import List, Optional

from readlogic_core import (
    Conjunction,
    Formula,
    ReadLogicError,
    Rule,
    collect_variables,
    default_parser,
    reformat,
)

from .config import CLIConfig
from .includes import load_knowledge_base

logger = logging.getLogger(__name__)

# --as choice -> PrologParser method
EXPRESSION_KINDS = {
    "term": "parse_term",
    "term-list": "parse_term_list",
    "function": "parse_function",
    "atom": "parse_atom",
    "rule": "parse_rule",
    "infix-function": "parse_infix_function",
}


def body_literals(rule: Rule) -> list:
    """Literals of a rule body, in order"""
    literals = []
    body = rule.body
    while isinstance(body, Conjunction):
        literals.append(body.right)
        body = body.left
    literals.append(body)
    return literals[::-1]


def format_rule(rule: Rule, multiline: bool = False) -> str:
    if not multiline:
        return rule.to_text()
    literals = ",\n\t".join(literal.to_text() for literal in body_literals(rule))
    return f"{rule.head.to_text()} :-\n\t{literals}."


def cmd_parse(args, config: CLIConfig) -> int:
    """Parse a knowledge base and print its rules in canonical form"""
    multiline = args.multiline or config.multiline

    try:
        rules = load_knowledge_base(args.file, normalize=args.reformat)
    except (FileNotFoundError, ReadLogicError) as e:
        print(f"  {e}", file=sys.stderr)
        return 1

    for rule in rules:
        print(format_rule(rule, multiline))

    logger.info("Parsed %d rules from %s", len(rules), args.file)
    return 0


def cmd_reformat(args, config: CLIConfig) -> int:
    """Normalize a rule given as argument or on stdin"""
    text = args.text if args.text is not None else sys.stdin.read()

    try:
        print(reformat(text, multiline=args.multiline or config.multiline))
    except ReadLogicError as e:
        print(f"  {e}", file=sys.stderr)
        return 1
    return 0


def cmd_check(args, config: CLIConfig) -> int:
    """Parse a single expression and describe it"""
    parse = getattr(default_parser(), EXPRESSION_KINDS[args.kind])

    try:
        result = parse(args.expression)
    except ReadLogicError as e:
        print(f"  {e}", file=sys.stderr)
        return 1

    print(result.to_text())
    if isinstance(result, Formula):
        variables = result.variables
    else:
        variables = collect_variables([result])
    print(f"  variables: {', '.join(sorted(v.symbol for v in variables)) or '-'}")
    print(f"  ground: {'yes' if result.is_ground else 'no'}")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="readlogic",
        description="Parse and normalize Prolog-like rules"
    )
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = arg_parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse a knowledge base file")
    parse_cmd.add_argument("file", help="Knowledge base file")
    parse_cmd.add_argument("--reformat", action="store_true",
                           help="Normalize free-form rules before parsing")
    parse_cmd.add_argument("--multiline", action="store_true",
                           help="Print one body literal per line")
    parse_cmd.set_defaults(handler=cmd_parse)

    reformat_cmd = subparsers.add_parser("reformat", help="Normalize a rule")
    reformat_cmd.add_argument("text", nargs="?", help="Rule text (read from stdin when omitted)")
    reformat_cmd.add_argument("--multiline", action="store_true",
                              help="Print one body literal per line")
    reformat_cmd.set_defaults(handler=cmd_reformat)

    check_cmd = subparsers.add_parser("check", help="Parse a single expression")
    check_cmd.add_argument("expression", help="Expression to parse")
    check_cmd.add_argument("--as", dest="kind", choices=sorted(EXPRESSION_KINDS), default="atom",
                           help="Kind of expression (default: atom)")
    check_cmd.set_defaults(handler=cmd_check)

    return arg_parser


def main(argv: Optional[List[str]] = None) -> int:
    config = CLIConfig.from_env()
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s"
    )

    return args.handler(args, config)


if __name__ == "__main__":
    sys.exit(main())
