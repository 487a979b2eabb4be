# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Naturals Contributors
#
# This file is part of Naturals.
#
# Naturals is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Naturals is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from collections.abc import Mapping
from typing import Any


class CatalogError(Exception):
    """
    Base class for catalog errors.

    Catalog operations themselves are total; this is raised when user input
    (e.g. a sort key typed on the command line) cannot be understood.
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "catalog_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message
