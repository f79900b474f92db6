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

import logging
from typing import Any, ClassVar, Union
from urllib.parse import quote as _uriquote

from .reaction_emoji import ReactionEmoji

__all__ = (
    'Route',
    'add_reaction',
    'remove_reaction',
    'remove_own_reaction',
    'get_reaction_users',
    'clear_single_reaction',
)

log = logging.getLogger(__name__)

EmojiInputType = Union[ReactionEmoji, str]

INTERNAL_API_BASE: str = "https://discord.com/api"
INTERNAL_API_VERSION: int = 10


def _set_api_version(value: int):
    api_list = (
        6, 7, 8, 9, 10,
    )

    global INTERNAL_API_VERSION

    if not isinstance(value, int):
        raise TypeError(f'expected int not {value.__class__.__name__}')

    if value not in api_list:
        raise ValueError(f'expected {api_list} not {value}')

    INTERNAL_API_VERSION = value
    Route.BASE = f"{INTERNAL_API_BASE}/v{value}"


def _set_api_base(value: str):
    global INTERNAL_API_BASE

    if not isinstance(value, str):
        raise TypeError(f'expected str not {value.__class__.__name__}')

    INTERNAL_API_BASE = value
    Route.BASE = f"{value}/v{INTERNAL_API_VERSION}"


class Route:
    BASE: ClassVar[str] = 'https://discord.com/api/v10'

    def __init__(self, method: str, path: str, **parameters: Any) -> None:
        self.path: str = path
        self.method: str = method
        url = self.BASE + self.path
        if parameters:
            self.url: str = url.format(**{k: _uriquote(v) if isinstance(v, str) else v for k, v in parameters.items()})
        else:
            self.url: str = url

    def __repr__(self) -> str:
        return f'<Route method={self.method!r} url={self.url!r}>'


def _reaction_route(method: str, path: str, emoji: EmojiInputType, **parameters: Any) -> Route:
    if isinstance(emoji, ReactionEmoji):
        emoji = emoji._as_reaction()
    elif isinstance(emoji, str):
        emoji = emoji.strip('<>')
    else:
        raise TypeError(f'emoji argument must be str or ReactionEmoji not {emoji.__class__.__name__}')

    r = Route(method, path, emoji=emoji, **parameters)
    log.debug('Built reaction route %s %s.', r.method, r.url)
    return r


def add_reaction(channel_id: int, message_id: int, emoji: EmojiInputType) -> Route:
    return _reaction_route(
        'PUT',
        '/channels/{channel_id}/messages/{message_id}/reactions/{emoji}/@me',
        emoji,
        channel_id=channel_id,
        message_id=message_id,
    )


def remove_reaction(channel_id: int, message_id: int, emoji: EmojiInputType, member_id: int) -> Route:
    return _reaction_route(
        'DELETE',
        '/channels/{channel_id}/messages/{message_id}/reactions/{emoji}/{member_id}',
        emoji,
        channel_id=channel_id,
        message_id=message_id,
        member_id=member_id,
    )


def remove_own_reaction(channel_id: int, message_id: int, emoji: EmojiInputType) -> Route:
    return _reaction_route(
        'DELETE',
        '/channels/{channel_id}/messages/{message_id}/reactions/{emoji}/@me',
        emoji,
        channel_id=channel_id,
        message_id=message_id,
    )


def get_reaction_users(channel_id: int, message_id: int, emoji: EmojiInputType) -> Route:
    return _reaction_route(
        'GET',
        '/channels/{channel_id}/messages/{message_id}/reactions/{emoji}',
        emoji,
        channel_id=channel_id,
        message_id=message_id,
    )


def clear_single_reaction(channel_id: int, message_id: int, emoji: EmojiInputType) -> Route:
    return _reaction_route(
        'DELETE',
        '/channels/{channel_id}/messages/{message_id}/reactions/{emoji}',
        emoji,
        channel_id=channel_id,
        message_id=message_id,
    )
