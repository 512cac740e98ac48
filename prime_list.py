#!/usr/bin/env python3
"""
Create a list of prime numbers up to a limit and save it to a file.

Usage:
  create-list-of-primes <limit> [--file-name]

  --file-name   append the limit to the output file name
  --update      accepted, but updating an existing list is not supported

The list is written to lists/list_of_primes[_up_to_<limit>].txt and the
largest prime found is written to logs/primelog.txt for the other tools.
"""

import argparse
import enum
import sys

from prime import build_prime_buffer
from prime_errors import (
    ArgumentFormatError,
    FileNameError,
    PathDisplayError,
    PrimeListError,
    UnsupportedModeError,
)
from prime_files import LISTS_DIR, LOGS_DIR, list_file_name, log_file_name, save_list, save_prime_in_log, show_path
from prime_numpy import NUMBER_MAX

PROG = "create-list-of-primes"

# Exit code when the log cannot be written after the list was saved
LOG_ERROR_EXIT = -7


class Mode(enum.IntEnum):
    NEW_NO_NUM = 0      # new list, generic file name
    NEW_NUM = 1         # new list, limit in the file name
    UPDATE_NO_NUM = 2
    UPDATE_NUM = 3


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentFormatError(f"error with argument format ({message})")


def parse_limit(text: str) -> int:
    if not (text.isascii() and text.isdecimal()):
        raise argparse.ArgumentTypeError(f"not a decimal number: {text!r}")
    number = int(text)
    if number == 0 or number >= NUMBER_MAX:
        raise argparse.ArgumentTypeError(f"limit must be between 1 and {NUMBER_MAX - 1}")
    return number


def build_parser() -> argparse.ArgumentParser:
    ap = _Parser(prog=PROG, allow_abbrev=False, add_help=False,
                 description="Compute all primes <= LIMIT and save them to a text file.")
    ap.add_argument("limit", type=parse_limit, help="Generate all primes <= LIMIT.")
    ap.add_argument("--file-name", action="count", default=0,
                    help="Append the limit to the output file name.")
    ap.add_argument("--update", action="count", default=0,
                    help="Update an existing list (not supported).")
    ap.add_argument("--lists-dir", default=LISTS_DIR,
                    help=f"Directory of the list file (default: {LISTS_DIR}).")
    ap.add_argument("--logs-dir", default=LOGS_DIR,
                    help=f"Directory of the prime log (default: {LOGS_DIR}).")
    return ap


def parse_args(argv: list[str]) -> argparse.Namespace:
    if "--" in argv:
        raise ArgumentFormatError("error with argument format (unrecognized token '--')")
    args = build_parser().parse_args(argv)
    for flag in ("file_name", "update"):
        if getattr(args, flag) > 1:
            raise ArgumentFormatError(f"error with argument format (--{flag.replace('_', '-')} repeated)")
    return args


def select_mode(args: argparse.Namespace) -> Mode:
    if args.update:
        return Mode.UPDATE_NUM if args.file_name else Mode.UPDATE_NO_NUM
    return Mode.NEW_NUM if args.file_name else Mode.NEW_NO_NUM


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        print(f"\n{PROG}: error with argument format")
        return -1

    try:
        args = parse_args(argv)
        mode = select_mode(args)
        if mode not in (Mode.NEW_NO_NUM, Mode.NEW_NUM):
            raise UnsupportedModeError(f"command error: update mode is not supported ({mode.name})")

        try:
            filename = list_file_name(args.limit if mode == Mode.NEW_NUM else None, args.lists_dir)
        except FileNameError as exc:
            raise FileNameError(f"error with file name ({exc})") from exc

        print(f"\nCalculating all prime numbers up to {args.limit:,}...")
        primes = build_prime_buffer(args.limit)
        print(f"Found {len(primes):,} prime numbers.")

        print("\nCreating file with prime numbers...")
        save_list(primes.view(), filename)
    except PrimeListError as exc:
        print(f"\n{PROG}: {exc}")
        return exc.exit_code

    try:
        show_path(filename)
    except PathDisplayError as exc:
        print(f"\n{PROG}: error showing path ({exc})")

    try:
        save_prime_in_log(primes.last, log_file_name(args.logs_dir))
    except PrimeListError as exc:
        print(f"\n{PROG}: error saving log ({exc})")
        return LOG_ERROR_EXIT

    return 0


if __name__ == "__main__":
    sys.exit(main())
