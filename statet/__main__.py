"""
Runs a stack program from the command line:

    python -m statet --context maybe --initial hello,world push:a pop pop
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from .config import StackDemoConfig
from .display import failure, outcome_table
from .instances import CONTEXTS
from .log import configure_logging
from .stack import empty_for, run_commands

logger = logging.getLogger(__name__)

def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="statet", description="Run a stack program in a chosen context")
    parser.add_argument("--context", default="either")
    parser.add_argument("--initial", default="",
                        help="comma separated initial stack, top first")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("commands", nargs="+",
                        help="push:X, pop or peek")
    return parser.parse_args(argv)

def main(argv: list[str] | None = None) -> int:
    """
    Entry point. Returns 0 on success, 1 when the context reports
    failure and 2 on invalid settings.
    """
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        config = StackDemoConfig(context=args.context,
                                 initial=args.initial,
                                 commands=tuple(args.commands),
                                 log_level=args.log_level.upper())
    except ValidationError as e:
        print(e, file=sys.stderr)
        return 2
    configure_logging(config.log_level)

    mf = CONTEXTS[config.context]
    prog = run_commands(mf, config.parsed_commands(),
                        empty_for(config.context))
    logger.info("running %d commands in %s", len(config.commands), mf.name)
    result = prog.run(config.initial, mf)

    failed = failure(result)
    if failed is not None:
        print(failed)
        return 1
    print(outcome_table(config.context, result), end="")
    return 0

if __name__ == "__main__":
    sys.exit(main())
