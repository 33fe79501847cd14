"""External editor invocation."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from fskit.errors import EditorError

logger = logging.getLogger(__name__)


def open_in_editor(path: Path | str, editor: str | None = None) -> None:
    """Open a file in the user's editor and wait for it to exit.

    The editor is ``editor`` if given, otherwise $VISUAL, then $EDITOR,
    then a platform default.

    Args:
        path: File to edit. It is created by the editor if missing.
        editor: Editor command line, e.g. "code --wait".

    Raises:
        EditorError: If the editor can't be started or exits with an error.
    """
    path = Path(path)
    logger.debug("editing %s with %s", path, editor or "default editor")
    try:
        click.edit(filename=str(path), editor=editor)
    except click.ClickException as e:
        raise EditorError(path, e) from e
