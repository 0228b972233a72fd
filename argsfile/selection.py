"""Interactive selection of an args file"""

import re
from typing import Callable, Optional

from rich.console import Console

from .reader import ArgsFileException

console = Console()


class InvalidSelection(ArgsFileException):
    """Raised when the answer does not select one of the offered files."""

    pass


def select_args_file(
    files: list[str],
    output: Optional[Console] = None,
    ask: Optional[Callable[[str], str]] = None,
) -> str:
    """
    Let the user select one of the args files by its number.

    Args:
        files: The file names to choose from
        output: Console to print the file list to (defaults to the module console)
        ask: Prompts for and returns one line of input (defaults to output.input)

    Returns:
        The selected file name

    Raises:
        InvalidSelection: If files is empty or the answer is not a valid file number
    """
    if not files:
        raise InvalidSelection("no args files to select from")

    if output is None:
        output = console
    if ask is None:
        ask = output.input

    output.print("[cyan]args files in the working directory:[/cyan]\n")
    for i, name in enumerate(files, start=1):
        output.print(f"  {i:>3}. {name}", markup=False, highlight=False)
    output.print()

    answer = ask("select via file number: ").strip()
    if not re.fullmatch(r"[+-]?[0-9]+", answer):
        raise InvalidSelection(f"{answer!r} is not a file number")

    num = int(answer)
    if num < 1 or num > len(files):
        raise InvalidSelection(f"{num} is not a valid file number")

    return files[num - 1]
