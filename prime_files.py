#!/usr/bin/env python3
"""
Text files written for a list of primes.

List file:
  quantity=<count>,last=<largest>
  2
  3
  ...

Log file: the largest prime on its own, read by the other prime tools.
An empty list reports 0 as its largest value in both files.
"""

import os
from pathlib import Path

from prime_errors import FileError, FileNameError, PathDisplayError, WriteError
from prime_numpy import NUMBER_MAX

FILE_EXTENSION = ".txt"
LISTS_DIR = "lists"
LOGS_DIR = "logs"
FILE_NAME_LONG = "list_of_primes_up_to_"
FILE_NAME_SHORT = "list_of_primes"
PRIME_LOG_FILE_NAME = "primelog"
HEADER_LINE_PT1 = "quantity="
HEADER_LINE_PT2 = ",last="


def _largest(primes) -> int:
    return int(primes[-1]) if len(primes) else 0


def serialize(primes) -> str:
    header = f"{HEADER_LINE_PT1}{len(primes)}{HEADER_LINE_PT2}{_largest(primes)}"
    return "\n".join([header, *(str(int(p)) for p in primes)])


def parse_header(text: str) -> tuple[int, int]:
    """Return (quantity, last) from the first line of a list file."""
    line = text.split("\n", 1)[0]
    quantity, sep, last = line.partition(HEADER_LINE_PT2)
    if not sep or not quantity.startswith(HEADER_LINE_PT1):
        raise ValueError(f"not a list header: {line!r}")
    quantity = quantity[len(HEADER_LINE_PT1):]
    if not all(part.isascii() and part.isdecimal() for part in (quantity, last)):
        raise ValueError(f"not a list header: {line!r}")
    return int(quantity), int(last)


def list_file_name(number: int | None = None, lists_dir: str = LISTS_DIR) -> Path:
    """Output path; 'number' is embedded in the name when given."""
    if number is None:
        return Path(lists_dir) / f"{FILE_NAME_SHORT}{FILE_EXTENSION}"
    if isinstance(number, bool) or not isinstance(number, int) or not 0 <= number <= NUMBER_MAX:
        raise FileNameError(f"cannot format {number!r} as a file name number")
    return Path(lists_dir) / f"{FILE_NAME_LONG}{number}{FILE_EXTENSION}"


def log_file_name(logs_dir: str = LOGS_DIR) -> Path:
    return Path(logs_dir) / f"{PRIME_LOG_FILE_NAME}{FILE_EXTENSION}"


def _write_text(path: Path, text: str) -> None:
    # A failed write leaves whatever was already written in place
    try:
        stream = open(path, "w", encoding="ascii", newline="")
    except OSError as exc:
        raise FileError(f"cannot open '{path}': {exc.strerror or exc}") from exc
    with stream:
        try:
            stream.write(text)
            stream.flush()
        except OSError as exc:
            raise WriteError(f"cannot write '{path}': {exc.strerror or exc}") from exc


def save_list(primes, path: Path) -> None:
    _write_text(Path(path), serialize(primes))


def save_prime_in_log(prime: int, path: Path) -> None:
    _write_text(Path(path), str(int(prime)))


def show_path(path: Path) -> str:
    """Print where the list was saved and return the directory shown."""
    path = Path(path)
    folder, name = path.parent, path.name
    if not name or folder == Path("."):
        raise PathDisplayError(f"cannot split '{path}' into folder and file name")

    try:
        directory = Path(os.getcwd()) / folder
    except OSError as exc:
        raise PathDisplayError(f"cannot resolve the working directory: {exc}") from exc

    print(f"\nThe list of prime numbers was saved in the file '{name}'...")
    print(f"\n... in the directory:\n\n{directory}")
    return str(directory)
