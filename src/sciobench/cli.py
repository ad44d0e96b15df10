# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line entry point."""

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

app = App(
    name="sciobench",
    help="Submit the benchmark matrix, wait for every job and print a report.",
)


@app.default
def run(
    name: Annotated[
        str | None,
        Parameter(
            help="Regular expression matched against whole benchmark names. "
            "Defaults to '.*' (every benchmark)."
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        Parameter(
            help="Path to the harness configuration file (JSON or YAML). "
            "Falls back to SCIOBENCH_CONFIG_FILE environment variable."
        ),
    ] = None,
    verbose: Annotated[
        bool,
        Parameter(name=["--verbose", "-v"], help="Enable debug logging."),
    ] = False,
) -> None:
    """Run benchmarks and print one report section per configuration."""
    from sciobench.cli_utils import exit_on_error

    with exit_on_error(title="Error Running Benchmarks"):
        from sciobench.cli_runner import run_benchmarks
        from sciobench.common.config import load_harness_config
        from sciobench.common.environment import Environment
        from sciobench.common.logging import setup_rich_logging

        setup_rich_logging("DEBUG" if verbose else Environment.LOGGING.LEVEL)
        config = load_harness_config(config_file, name_filter=name)
        run_benchmarks(config)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
