"""Command-line interface handler for args files."""

import argparse
import os
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import reader
from .discovery import get_dir_files_in
from .workflow import resolve_args

console = Console()


def print_usage() -> None:
    """Print usage information."""
    console.print(
        """Usage: argsfile [-h | --help] <command> [<args>]

Commands:
  read                     Print the arguments an args file expands to
      <file>               The args file

  list                     List the args files of an application
      -d, --dir DIR        The directory containing the args files (default ./)
      <app>                The application name

  resolve                  Resolve an argument vector like an application would
      <argv>...            The argument vector, starting with the application name.
                           Everything after resolve is passed through unchanged,
                           including --args, --no-args and --no-auto-args.

  help                     Show this help message
  version                  Show program version
""",
        markup=False,
        highlight=False,
    )


def print_version() -> None:
    """Print version information."""
    console.print("1.0")


def print_args(title: str, args: list[str]) -> None:
    """Print a numbered list of arguments."""
    console.print(f"[bold]{escape(title)}[/bold]")
    console.print("-" * len(title))
    for i, arg in enumerate(args):
        console.print(f"{i:>3}. {arg!r}", markup=False, highlight=False)


def cmd_read(args: argparse.Namespace) -> None:
    """Execute the read command."""
    if not args.file:
        console.print("[red]Please specify an args file to read[/red]\n")
        print_usage()
        sys.exit(1)

    print_args(f"args in {args.file}:", reader.read_file(args.file))


def cmd_list(args: argparse.Namespace) -> None:
    """Execute the list command."""
    if not args.app:
        console.print("[red]Please specify an application name[/red]\n")
        print_usage()
        sys.exit(1)

    directory = args.dir if args.dir else os.getcwd()
    dir_files = get_dir_files_in(args.app, directory)

    if not dir_files.default_args and not dir_files.args_files:
        console.print(
            f"[yellow]No args files for {escape(args.app)} in {escape(directory)}[/yellow]"
        )
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("File", style="cyan")
    table.add_column("Usage", style="green")

    if dir_files.default_args:
        table.add_row(dir_files.default_args, "default")
    for name in dir_files.args_files:
        table.add_row(name, "selectable")

    console.print(f"[dim]Directory: {escape(directory)}[/dim]")
    console.print(table)


def cmd_resolve(argv: list[str]) -> None:
    """Execute the resolve command."""
    if not argv:
        console.print("[red]Please specify the argument vector to resolve[/red]\n")
        print_usage()
        sys.exit(1)

    print_args("resolved args:", resolve_args(argv))


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) < 1:
        print_usage()
        return

    # The argument vector of resolve must not be parsed by argparse
    if argv[0] == "resolve":
        cmd_resolve(argv[1:])
        return

    parser = argparse.ArgumentParser(
        prog="argsfile", description="Args file tool", add_help=False
    )

    # Add global help
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Read command
    read_parser = subparsers.add_parser("read", add_help=False)
    read_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for read"
    )
    read_parser.add_argument("file", nargs="?", help="Args file path")

    # List command
    list_parser = subparsers.add_parser("list", add_help=False)
    list_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for list"
    )
    list_parser.add_argument(
        "-d", "--dir", type=str, help="Directory containing the args files"
    )
    list_parser.add_argument("app", nargs="?", help="Application name")

    # Help command
    subparsers.add_parser("help", add_help=False)

    # Version command
    subparsers.add_parser("version", add_help=False)

    args = parser.parse_args(argv)

    # Handle global help
    if args.help or args.command == "help":
        print_usage()
        return

    # Handle version
    if args.command == "version":
        print_version()
        return

    # Handle command-specific help
    if hasattr(args, "help") and args.help:
        print_usage()
        return

    # Execute commands
    if args.command == "read":
        cmd_read(args)
    elif args.command == "list":
        cmd_list(args)
    else:
        print_usage()
