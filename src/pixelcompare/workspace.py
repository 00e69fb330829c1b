"""Working directory lifecycle.

Each run owns three directories (rendered pages of the first document,
rendered pages of the second one and the diff results).  Before anything is
rendered the page images left over from a previous run are removed so that
stale pages can never be paired with fresh ones.  Only files carrying the
image extension are touched; anything else the operator keeps in those
directories survives.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

from .config import IMAGE_EXTENSION, RunConfig
from .errors import WorkspaceError

logger = logging.getLogger(__name__)


def clear_directory(path: str | Path, extension: str = IMAGE_EXTENSION) -> int:
    """Delete files ending in ``extension`` directly inside ``path``.

    Returns the number of removed files.  Sub-directories are not visited.
    """

    directory = Path(path)
    removed = 0
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise WorkspaceError(directory, f"cannot list directory ({exc})") from exc

    for entry in entries:
        if not entry.name.endswith(extension) or not entry.is_file():
            continue
        try:
            entry.unlink()
        except OSError as exc:
            raise WorkspaceError(entry, f"cannot delete file ({exc})") from exc
        removed += 1
    return removed


def prepare_directory(path: str | Path, extension: str = IMAGE_EXTENSION) -> None:
    """Create ``path`` or clear the images it already contains."""

    directory = Path(path)
    if not directory.exists():
        try:
            directory.mkdir(parents=True)
        except OSError as exc:
            raise WorkspaceError(directory, f"cannot create directory ({exc})") from exc
        logger.debug("Created %s", directory)
        return

    if not directory.is_dir():
        raise WorkspaceError(directory, "exists but is not a directory")

    removed = clear_directory(directory, extension)
    logger.info("Cleaned up %d %s files in %s", removed, extension.lstrip(".").upper(), directory)


def workspace_directories(config: RunConfig) -> List[Path]:
    return [config.first_dir, config.second_dir, config.result_dir]


def check_distinct(config: RunConfig) -> None:
    """Raise :class:`WorkspaceError` when two workspace roles share a directory."""

    roles = (
        ("first", config.first_dir),
        ("second", config.second_dir),
        ("result", config.result_dir),
    )
    seen: Dict[Path, str] = {}
    for role, directory in roles:
        resolved = Path(directory).resolve()
        if resolved in seen:
            raise WorkspaceError(
                directory, f"used as both the {seen[resolved]} and the {role} directory"
            )
        seen[resolved] = role


def prepare_workspace(config: RunConfig) -> None:
    """Prepare the first, second and result directories, in that order.

    Nothing is created or deleted unless the three directories are distinct.
    """

    check_distinct(config)
    for directory in workspace_directories(config):
        prepare_directory(directory)
