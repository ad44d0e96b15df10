# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Report exporters."""

from sciobench.exporters.console_report_exporter import (
    ConsoleReportExporter,
    render_report_section,
)

__all__ = [
    "ConsoleReportExporter",
    "render_report_section",
]
