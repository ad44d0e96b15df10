# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Error presentation helpers for the command line."""

import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


def raise_startup_error_and_exit(
    message: str, title: str = "Error", exit_code: int = 1
) -> NoReturn:
    """Print ``message`` in an error panel on stderr and exit."""
    console = Console(stderr=True)
    console.print(
        Panel(
            Text(message),
            title=title,
            border_style="bold red",
            title_align="left",
            expand=False,
        )
    )
    console.file.flush()
    sys.exit(exit_code)


@contextmanager
def exit_on_error(title: str = "Error") -> Generator[None, None, None]:
    """Turn any exception escaping the block into an error panel and exit code 1.

    ``SystemExit`` and ``KeyboardInterrupt`` pass through untouched.
    """
    try:
        yield
    except (SystemExit, KeyboardInterrupt):
        raise
    except Exception as e:
        raise_startup_error_and_exit(f"{type(e).__name__}: {e}", title=title)
