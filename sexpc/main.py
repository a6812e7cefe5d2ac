import argparse
import datetime
import sys
from typing import List, Optional

import yaml
from rich.console import Console

from sexpc import compile_stages
from sexpc.errors import CompileError, NestingError
from sexpc.logger import SEXPC_LOG as LOG
from sexpc.logger import init_logging
from sexpc.printer import dump, to_rich

console = Console()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compile s-expression calls into C-like call statements."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "-s", "--source", type=str, help="Path to the source program file."
    )
    source.add_argument("-e", "--expr", type=str, help="Source program given inline.")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Write the generated code to this file instead of stdout.",
    )
    parser.add_argument(
        "--dump",
        help="Print the tokens, the source AST and the target AST.",
        action="store_true",
    )
    parser.add_argument(
        "--dump_format",
        help="Format of the stage dump, default is yaml.",
        choices=["yaml", "tree"],
        default="yaml",
    )
    parser.add_argument("-v", "--verbose", help="Print debug info.", action="store_true")
    return parser.parse_args(argv)


def print_stages(stages, fmt: str):
    try:
        show_stages(stages, fmt)
    except RecursionError:
        raise NestingError("stage dump", nesting_depth(stages.tokens)) from None


def nesting_depth(tokens) -> int:
    depth = deepest = 0
    for t in tokens:
        if t.value == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif t.value == ")":
            depth -= 1
    return deepest


def show_stages(stages, fmt: str):
    for title, data in [
        ("tokens", dump(stages.tokens)),
        ("source AST", dump(stages.ast)),
        ("target AST", dump(stages.new_ast)),
    ]:
        console.print()
        console.print(title, style="underline bold italic")
        if fmt == "tree":
            console.print(to_rich(title, data))
        else:
            console.print(
                yaml.safe_dump(data, default_flow_style=False, sort_keys=False),
                markup=False,
                highlight=False,
            )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    init_logging(args.verbose)

    if args.source is not None:
        LOG.info(f"Reading source file {args.source}...")
        with open(args.source, "r") as f:
            text = f.read()
    else:
        text = args.expr

    start = datetime.datetime.now()
    try:
        stages = compile_stages(text)
        end = datetime.datetime.now()
        LOG.debug(f"Compilation took: {(end - start).total_seconds() * 1000}ms")
        if args.dump:
            print_stages(stages, args.dump_format)
    except CompileError as e:
        LOG.error(f"{type(e).__name__}: {e}")
        return 1

    if args.output:
        with open(args.output, "w") as f:
            f.write(stages.output + "\n")
        LOG.info(f"Generated code written to {args.output}")
    else:
        print(stages.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
