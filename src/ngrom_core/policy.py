"""Genesis ROM dump - STOP / WARN / SKIP check actions.

One policy value is chosen per run and applied to every file in the batch.
The same enum drives two independent concerns: the response to a failed
format check and the response to an output file that already exists.
"""
from __future__ import annotations

from enum import Enum

import click


class FileCheckAction(Enum):
    UNSET = "unset"
    STOP = "stop"
    WARN = "warn"
    SKIP = "skip"

    @classmethod
    def parse(cls, text: str) -> "FileCheckAction":
        """Map a CLI string to an action. Unrecognized strings give UNSET."""
        for action in (cls.STOP, cls.WARN, cls.SKIP):
            if text == action.value:
                return action
        return cls.UNSET


# Values accepted on the command line, in help-text order.
ACTION_CHOICES = [FileCheckAction.STOP.value, FileCheckAction.WARN.value, FileCheckAction.SKIP.value]


class StopRequested(Exception):
    """A STOP policy fired; the batch must end now."""


def apply_action(
    action: FileCheckAction,
    message: str,
    warn_note: str | None = None,
    skip_note: str | None = None,
    announce_stop: bool = True,
) -> bool:
    """Respond to a failed check according to ``action``.

    The warning is printed, except on STOP when ``announce_stop`` is False
    and the caller reports the stop itself. Returns True when the caller
    should carry on with the item (WARN) and False when it should leave it
    alone and move on (SKIP). STOP raises StopRequested carrying ``message``.
    """
    if action not in (FileCheckAction.STOP, FileCheckAction.WARN, FileCheckAction.SKIP):
        raise ValueError(f"Unresolved check action: {action!r}")

    if action is not FileCheckAction.STOP or announce_stop:
        click.echo(f"NGROM WARNING: {message}", err=True)

    if action is FileCheckAction.STOP:
        raise StopRequested(message)
    if action is FileCheckAction.WARN:
        if warn_note:
            click.echo(warn_note)
        return True
    if skip_note:
        click.echo(skip_note)
    return False
