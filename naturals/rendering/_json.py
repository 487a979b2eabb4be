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

import json
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any


def to_jsonable(obj: Any) -> Any:
    if obj is None:
        return None

    # str-valued enums (SortKey) must serialize by value, not repr
    if isinstance(obj, Enum):
        return to_jsonable(obj.value)

    if isinstance(obj, (str, int, float, bool)):
        return obj

    if isinstance(obj, Mapping):
        # sort keys for determinism
        return {str(k): to_jsonable(obj[k]) for k in sorted(obj.keys(), key=lambda x: str(x))}

    if isinstance(obj, (list, tuple)):
        return [to_jsonable(v) for v in obj]

    if hasattr(obj, "to_dict"):
        return to_jsonable(obj.to_dict())

    if is_dataclass(obj) and not isinstance(obj, type):
        return to_jsonable(asdict(obj))

    return repr(obj)


def dumps_deterministic(data: Any, *, indent: int | None = None) -> str:
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(to_jsonable(data), sort_keys=True, indent=indent, separators=separators, ensure_ascii=False)
