"""Discovery of args files in a directory."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

ARGS_SUFFIX = ".args"
AUTO_ARGS_SUFFIX = ".auto.args"


@dataclass
class DirFiles:
    """The args files of an application in a directory."""

    default_args: Optional[str] = None
    args_files: list[str] = field(default_factory=list)


def get_dir_files_in(app_name: str, directory: str) -> DirFiles:
    """
    Find the args files for an application in a directory.

    Naming convention:
    - <app_name>.auto.args is the default args file
    - Any other <app_name>*.args file can be selected by the user

    Args:
        app_name: The application name the files must start with
        directory: The directory to scan, sub-directories are skipped

    Returns:
        DirFiles with file names relative to directory, args_files sorted
    """
    dir_files = DirFiles()

    for entry in sorted(Path(directory).iterdir()):
        if not entry.is_file():
            continue

        name = entry.name
        if name == app_name + AUTO_ARGS_SUFFIX:
            dir_files.default_args = name
        elif name.startswith(app_name) and name.endswith(ARGS_SUFFIX):
            dir_files.args_files.append(name)

    return dir_files


def get_dir_files(app_name: str) -> DirFiles:
    """Find the args files for an application in the working directory."""
    return get_dir_files_in(app_name, os.getcwd())
