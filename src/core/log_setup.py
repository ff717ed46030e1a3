"""Logging setup (Rich handler on stderr).

Modules log through `logging.getLogger(__name__)`; this installs a single
`RichHandler` on the root logger so diagnostics never mix with passwords on
stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "passgen-rich"


def configure_logging(level: int | str = logging.WARNING) -> None:
    """Install the Rich handler once and set the root level."""

    root = logging.getLogger()
    root.setLevel(level)
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    root.addHandler(handler)
