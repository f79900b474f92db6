# -*- coding: utf-8 -*-

"""
The MIT License (MIT)

Copyright (c) 2015-present Rapptz

Permission is hereby granted, free of charge, to any person obtaining a
copy of this software and associated documentation files (the "Software"),
to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense,
and/or sell copies of the Software, and to permit persons to whom the
Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS
OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER
DEALINGS IN THE SOFTWARE.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Mapping, Optional

from .errors import InvalidArgument

__all__ = (
    'MISSING',
    'DISCORD_EPOCH',
    'MAX_SNOWFLAKE',
    'to_unsigned',
    'get_as_snowflake',
    'snowflake_time',
)

log = logging.getLogger(__name__)

DISCORD_EPOCH = 1420070400000

MAX_SNOWFLAKE = (1 << 64) - 1
_MIN_SIGNED = -(1 << 63)


class _MissingSentinel:
    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    def __hash__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return '...'


MISSING: Any = _MissingSentinel()


def to_unsigned(value: int) -> int:
    """
    Normalise a 64-bit identifier to its unsigned value.

    Negative values are treated as the bit pattern of a signed 64-bit
    integer, so ``-1`` becomes ``18446744073709551615``.

    Raises:
        TypeError: The value is not an ``int``.
        InvalidArgument: The value does not fit in 64 bits.

    Returns:
        int: The unsigned identifier.
    """
    # bool is an int subclass but never a valid id
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f'expected int not {value.__class__.__name__}')

    if value < _MIN_SIGNED or value > MAX_SNOWFLAKE:
        raise InvalidArgument(f'id {value} does not fit in 64 bits')

    if value < 0:
        unsigned = value & MAX_SNOWFLAKE
        log.debug('Normalised signed id %s to unsigned %s.', value, unsigned)
        return unsigned

    return value


def get_as_snowflake(data: Mapping[str, Any], key: str) -> Optional[int]:
    try:
        value = data[key]
    except KeyError:
        return None
    else:
        return value and int(value)


def snowflake_time(id: int) -> datetime.datetime:
    """
    Return the creation time of the given snowflake.

    Args:
        id (int): The snowflake ID.

    Returns:
        datetime.datetime: An aware datetime in UTC.
    """
    timestamp = ((id >> 22) + DISCORD_EPOCH) / 1000
    return datetime.datetime.fromtimestamp(timestamp, tz=datetime.timezone.utc)
