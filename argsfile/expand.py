"""Expansion of the --args argument and handling of sentinel flags."""

from typing import Callable

from .reader import ArgsFileException, read_file

ARGS_FLAG = "--args"
NO_ARGS_FLAG = "--no-args"
NO_AUTO_ARGS_FLAG = "--no-auto-args"


class NoArgs(Exception):
    """Raised when an argument list has no --args argument to expand."""

    pass


class MissingArgsValue(ArgsFileException):
    """Raised when --args is not followed by a filepath."""

    pass


def expand_args(
    args: list[str], read_args: Callable[[str], list[str]] = read_file
) -> list[str]:
    """
    Expand the first --args argument with the content of its args file.

    Args:
        args: The argument list
        read_args: Reads the arguments of the args file at the given path

    Returns:
        A new list with "--args <file>" replaced by the file's arguments

    Raises:
        NoArgs: If args has no --args argument
        MissingArgsValue: If --args is the last argument
    """
    if ARGS_FLAG not in args:
        raise NoArgs(f"no {ARGS_FLAG} argument")

    idx = args.index(ARGS_FLAG)
    if idx == len(args) - 1:
        raise MissingArgsValue(f"missing {ARGS_FLAG} filepath value")

    inserted = read_args(args[idx + 1])
    return args[:idx] + inserted + args[idx + 2 :]


def pull_flag(args: list[str], flag: str) -> tuple[list[str], bool]:
    """Remove the first occurrence of flag, returning the reduced list and whether it was found."""
    if flag not in args:
        return list(args), False

    idx = args.index(flag)
    return args[:idx] + args[idx + 1 :], True


def pull_no_args(args: list[str]) -> tuple[list[str], bool]:
    return pull_flag(args, NO_ARGS_FLAG)


def pull_no_auto_args(args: list[str]) -> tuple[list[str], bool]:
    return pull_flag(args, NO_AUTO_ARGS_FLAG)
