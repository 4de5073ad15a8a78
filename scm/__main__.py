import argparse
import logging
import sys

from scm.config import get_log_level, get_prompt
from scm.repl import repl


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="scm", description="scm Scheme interpreter")
    parser.add_argument("--path", help="path to the script to execute", default=None)
    parser.add_argument("--no-prompt", action="store_true", help="do not print the prompt")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.path is not None:
        with open(args.path, encoding="utf-8") as script:
            repl(script, prompt="")
        return 0

    repl(prompt="" if args.no_prompt else get_prompt())
    return 0


if __name__ == "__main__":
    sys.exit(main())
