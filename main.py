from __future__ import annotations
from typing import List, Optional
import json
from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render

DEFAULT_EXPRESSION = "3 + 5 * (((10 - 2)))"


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(
    tokens: List[Token], strict: bool = False, trace: bool = False
) -> ASTNode:
    """Parse tokens into AST."""
    parser = Parser(tokens, strict=strict, trace=trace)
    return parser.parse()


def process_expression(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    print_surface: bool = False,
    strict: bool = False,
    trace: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> Optional[ASTNode]:
    """Process a single expression: lex, parse and optionally print stages.

    Returns the AST, or None when the input is rejected. Errors are reported
    on stdout rather than raised.
    """
    try:
        tokens = lex(text)
    except SyntaxError as e:
        print(f"Tokenization Error: {e}")
        return None

    if print_tokens:
        print(f"Tokens ({len(tokens)}):")
        for i, token in enumerate(tokens):
            print(f"  {i:3}: {token}")

    try:
        ast = parse_tokens(tokens, strict=strict, trace=trace)
    except SyntaxError as e:
        print(f"Parse Error: {e}")
        return None

    try:
        if print_ast:
            print("\nAST:")
            print(PrettyPrinter.print_ast(ast))

        if print_surface:
            print("\nGrouping:")
            print(PrettyPrinter.print_surface(ast))

        if dump_ast_path:
            try:
                with open(dump_ast_path, "w", encoding="utf-8") as fh:
                    json.dump(ast_to_json(ast), fh, indent=2)
                print(f"Wrote AST JSON to {dump_ast_path}")
            except Exception as e:
                print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

        if viz_path:
            try:
                write_and_render(ast, viz_path, fmt=viz_format)
                print(f"Wrote AST visualization to {viz_path}.{viz_format}")
            except Exception as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}")
    except Exception as e:
        print(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return None

    return ast


def interactive_mode(
    print_tokens: bool = False,
    print_ast: bool = True,
    print_surface: bool = False,
    strict: bool = False,
    trace: bool = False,
) -> None:
    """Run an interactive parser REPL reading expressions from stdin."""
    print("\nInteractive Parser Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter expression: ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break

        if not text:
            continue

        try:
            process_expression(
                text,
                print_tokens=print_tokens,
                print_ast=print_ast,
                print_surface=print_surface,
                strict=strict,
                trace=trace,
            )
        except Exception as e:
            print(f"Unexpected error: {e}")


def build_arg_parser():
    import argparse

    parser = argparse.ArgumentParser(
        description="Tokenize and parse an arithmetic expression into an AST"
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help=f"Expression to parse (default: {DEFAULT_EXPRESSION!r})",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to a file holding the expression"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--surface",
        dest="print_surface",
        action="store_true",
        help="Print the expression fully parenthesized",
    )
    parser.add_argument(
        "--trace",
        dest="trace",
        action="store_true",
        help="Print every parser step",
    )
    # parsing policy
    parser.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help="Reject tokens left over after a complete expression",
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if args.interactive:
        interactive_mode(
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            print_surface=args.print_surface,
            strict=args.strict,
            trace=args.trace,
        )
        return 0

    print_tokens = args.print_tokens
    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1
    elif args.expression is not None:
        text = args.expression
    else:
        # Built-in example: show the token list as well.
        text = DEFAULT_EXPRESSION
        print_tokens = True

    ast = process_expression(
        text,
        print_tokens=print_tokens,
        print_ast=args.print_ast,
        print_surface=args.print_surface,
        strict=args.strict,
        trace=args.trace,
        dump_ast_path=args.dump_ast,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
    )
    return 0 if ast is not None else 1


if __name__ == "__main__":
    import sys

    sys.exit(main())
