# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logging setup and the lazy-message logger used across the harness."""

import logging
from collections.abc import Callable

from rich.console import Console
from rich.logging import RichHandler

_LOG_FORMAT = "%(message)s"
_DATE_FORMAT = "[%X]"

Message = str | Callable[[], str]


def setup_rich_logging(level: str | int = logging.INFO) -> None:
    """Route all harness logging through a rich handler on stderr.

    Calling this more than once replaces the previously installed handler, so
    the level can be changed after configuration files have been read.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


class SciobenchLogger:
    """Thin wrapper over :class:`logging.Logger` that accepts lazy messages.

    A message can be a callable returning the string; it is only evaluated if
    the level is enabled, e.g. ``logger.debug(lambda: f"state={handle.state()}")``.
    """

    def __init__(self, name: str) -> None:
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, message: Message, **kwargs) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if callable(message):
            message = message()
        # stacklevel points the record at the caller of debug()/info()/...
        self._logger.log(level, message, stacklevel=3, **kwargs)

    def debug(self, message: Message) -> None:
        self._log(logging.DEBUG, message)

    def info(self, message: Message) -> None:
        self._log(logging.INFO, message)

    def warning(self, message: Message) -> None:
        self._log(logging.WARNING, message)

    def error(self, message: Message) -> None:
        self._log(logging.ERROR, message)

    def exception(self, message: Message) -> None:
        self._log(logging.ERROR, message, exc_info=True)
