#!/usr/bin/env python3
"""Errors raised while building and saving a list of primes.

Each error carries the process exit code the command line reports for it.
"""


class PrimeListError(Exception):
    exit_code = -1


class ArgumentFormatError(PrimeListError):
    """Missing or malformed command-line arguments."""
    exit_code = -2


class UnsupportedModeError(PrimeListError):
    """An update mode was requested; only new lists can be created."""
    exit_code = -3


class FileNameError(PrimeListError):
    exit_code = -4


class AllocationError(PrimeListError):
    """The prime buffer could not be allocated or grown."""
    exit_code = -5


class FileError(PrimeListError):
    """A file could not be opened."""
    exit_code = -6


class WriteError(PrimeListError):
    """A write failed after the file was opened."""
    exit_code = -6


class PathDisplayError(PrimeListError):
    # Non-fatal: the list is already on disk when this is raised.
    exit_code = 0
