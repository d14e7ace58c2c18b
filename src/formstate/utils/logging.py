"""Logging helpers."""

from __future__ import annotations

import logging

SESSION_LOGGER = "formstate.forms.session"


def configure_logging(
    level: int | str = logging.WARNING,
    *,
    debug_transitions: bool = False,
    force: bool = False,
) -> None:
    """Initialise the root logger once with a terse CLI format.

    ``debug_transitions`` lowers the session logger to DEBUG so every snapshot
    transition is reported regardless of ``level``.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    if debug_transitions:
        logging.getLogger(SESSION_LOGGER).setLevel(logging.DEBUG)
