from __future__ import annotations

import argparse
import json
import sys

from services.api.app.log_config import configure_logging
from services.api.app.nlp.interpreter import CommandInterpreter


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interpret a form update command")
    parser.add_argument("command", nargs="+", help='e.g. "change the deductible to $2,000"')
    parser.add_argument("--verbose", action="store_true", help="Log why a command was rejected")
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    result = CommandInterpreter().interpret(" ".join(args.command))
    if result is None:
        print("null")
        return 1

    print(json.dumps(result.model_dump()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
