"""Resolution of a program's arguments with args files."""

import os
import sys
from typing import Callable, Optional

from .discovery import get_dir_files_in
from .expand import (
    ARGS_FLAG,
    NoArgs,
    expand_args,
    pull_no_args,
    pull_no_auto_args,
)
from .reader import read_file
from .selection import select_args_file


def resolve_args(
    argv: list[str],
    directory: Optional[str] = None,
    select: Callable[[list[str]], str] = select_args_file,
    read_args: Callable[[str], list[str]] = read_file,
) -> list[str]:
    """
    Resolve the arguments of a program with args files.

    Order of resolution:
    1. An explicit --args <file> argument is expanded
    2. Otherwise <app>.auto.args in directory is used, unless --no-args or
       --no-auto-args is given
    3. Otherwise the user selects one of the <app>*.args files in directory,
       unless --no-args is given
    4. Otherwise the arguments are returned without the sentinel flags

    Args:
        argv: The argument vector, argv[0] being the program name
        directory: The directory to look for args files (defaults to the working directory)
        select: Picks one file name from the offered args files
        read_args: Reads the arguments of an args file

    Returns:
        The resolved argument vector, starting with the program name
    """
    if not argv:
        return list(argv)

    try:
        return expand_args(argv, read_args)
    except NoArgs:
        pass

    app_name = argv[0]
    rest, has_no_auto_args = pull_no_auto_args(argv[1:])
    rest, has_no_args = pull_no_args(rest)

    if directory is None:
        directory = os.getcwd()
    dir_files = get_dir_files_in(os.path.basename(app_name), directory)

    if dir_files.default_args and not has_no_args and not has_no_auto_args:
        args_file = dir_files.default_args
    elif dir_files.args_files and not has_no_args:
        args_file = select(dir_files.args_files)
    else:
        return [app_name] + rest

    filepath = os.path.join(directory, args_file)
    return expand_args([app_name, ARGS_FLAG, filepath] + rest, read_args)


def args(argv: Optional[list[str]] = None) -> list[str]:
    """Resolve the arguments of the running program, argv defaults to sys.argv."""
    if argv is None:
        argv = sys.argv
    return resolve_args(list(argv))
