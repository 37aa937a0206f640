import logging
import sys
from typing import List, Optional

from .config import MAX_DIGITS, Settings
from .generator import ChallengeGenerator
from .serialize import factors_to_expanded_string, value_to_decimal_string


USAGE = """Usage:
  --factors=<digits> : Generate work for factors of a large number with <digits> digits."""

FLAG = "--factors="


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=Settings.from_env().log_level,
                        format="%(levelname)s: %(message)s")

    digits = None
    for arg in args:
        if not arg.startswith(FLAG):
            print(f"ERROR: Invalid arg \"{arg}\"!", file=sys.stderr)
            print(USAGE)
            return 1
        raw = arg[len(FLAG):]
        digits = int(raw) if raw.isascii() and raw.isdigit() else 0
        if digits <= 0:
            print(f"ERROR: Could not convert arg \"{arg}\" digits!", file=sys.stderr)
            return 2
        if digits > MAX_DIGITS:
            print(f"ERROR: \"{arg}\" is out of range!", file=sys.stderr)
            return 3

    if digits is None:
        print(USAGE)
        return 1

    challenge = ChallengeGenerator().generate_digits(digits)
    print(value_to_decimal_string(challenge))
    print(factors_to_expanded_string(challenge.factors))
    return 0


if __name__ == "__main__":
    sys.exit(main())
