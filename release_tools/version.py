# release_tools/version.py
import re
from pathlib import Path
from typing import Union

from release_tools.utils.exceptions import MissingArgument, PatternNotFound
from release_tools.utils.logger import logger

VERSION_PATTERN = re.compile(r"(our \$VERSION = ')([^']+)(';)")

PathLike = Union[str, Path]


def _read_source(module_path: PathLike) -> str:
    # newline="" keeps CRLF as is, so the rewrite stays byte-exact
    with open(module_path, "r", encoding="utf-8", newline="") as file:
        return file.read()


def read_module_version(module_path: PathLike) -> str:
    """Return the literal of `our $VERSION = '...';` declared in the module."""
    match = VERSION_PATTERN.search(_read_source(module_path))
    if match is None:
        raise PatternNotFound(Path(module_path))
    return match.group(2)


def update_module_version(version: str, module_path: PathLike) -> str:
    """
    Replace the $VERSION literal in `module_path` with `version`.

    Only the first declaration is touched, everything else is written back
    unchanged. Nothing is written if the version is empty or the declaration
    is missing. Returns the previous version.
    """
    if not version:
        raise MissingArgument()

    source = _read_source(module_path)
    match = VERSION_PATTERN.search(source)
    if match is None:
        raise PatternNotFound(Path(module_path))

    previous = match.group(2)
    updated = source[: match.start(2)] + version + source[match.end(2):]

    with open(module_path, "w", encoding="utf-8", newline="") as file:
        file.write(updated)

    logger.debug(f"{module_path}: $VERSION '{previous}' -> '{version}'")
    return previous
