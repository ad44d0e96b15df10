# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from sciobench.common.logging import Message, SciobenchLogger


class LoggerMixin:
    """Give a component ``self.debug(...)``, ``self.info(...)`` etc.

    The logger is named after the concrete class's module unless
    ``logger_name`` is passed explicitly.
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.logger = SciobenchLogger(logger_name or type(self).__module__)

    def debug(self, message: Message) -> None:
        self.logger.debug(message)

    def info(self, message: Message) -> None:
        self.logger.info(message)

    def warning(self, message: Message) -> None:
        self.logger.warning(message)

    def error(self, message: Message) -> None:
        self.logger.error(message)

    def exception(self, message: Message) -> None:
        self.logger.exception(message)
