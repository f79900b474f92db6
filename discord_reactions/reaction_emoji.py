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
from typing import Any, Optional, TYPE_CHECKING, overload

from .abc import GuildEmojiLike
from .errors import InvalidArgument
from .regex import CUSTOM_EMOJI_RE, INVALID_EMOJI_NAME_RE
from . import utils
from .utils import MISSING

if TYPE_CHECKING:
    from typing_extensions import Self

    from .types.emoji import PartialEmoji as PartialEmojiPayload

__all__ = (
    'ReactionEmoji',
)


class ReactionEmoji:
    """Represents an emoji on a reaction.

    This can either be a unicode emoji or a custom guild emoji. In the case
    of the former, :attr:`id` is ``0``. This is a value-based class: two
    instances with the same name and ID are interchangeable.

    Instances should be created through :meth:`from_guild_emoji`,
    :meth:`from_unicode`, :meth:`from_dict` or :meth:`from_str`. The keyword
    constructor is internal; it applies the same name and ID rules, with an
    ID of ``0`` meaning a unicode emoji.

    .. container:: operations

        .. describe:: x == y

            Checks if two reaction emoji have the same name and ID.

        .. describe:: x != y

            Checks if two reaction emoji are not equal.

        .. describe:: hash(x)

            Returns the reaction emoji's hash.

        .. describe:: str(x)

            Returns the unicode emoji, or ``<name:id>`` for a guild emoji.

    Attributes
    -----------
    name: :class:`str`
        The name of the emoji. For a unicode emoji this is the unicode character(s).
    id: :class:`int`
        The ID of the emoji, or ``0`` for a unicode emoji. Always unsigned.
    """

    __slots__ = ('_name', '_id')

    def __init__(self, *, name: str, id: int = 0) -> None:
        # id 0 is a unicode emoji, anything else a guild emoji whose name
        # must survive the <name:id> form
        if not isinstance(name, str):
            raise TypeError(f'expected str not {name.__class__.__name__}')

        id = utils.to_unsigned(id)
        if id != 0 and INVALID_EMOJI_NAME_RE.search(name) is not None:
            raise InvalidArgument(f'guild emoji name {name!r} cannot contain whitespace, colons or angle brackets')

        self._name: str = name
        self._id: int = id

    @overload
    @classmethod
    def from_guild_emoji(cls, emoji: GuildEmojiLike, /) -> Self:
        ...

    @overload
    @classmethod
    def from_guild_emoji(cls, name: str, id: int, /) -> Self:
        ...

    @classmethod
    def from_guild_emoji(cls, emoji: Any, id: int = MISSING, /) -> Self:
        """Constructs a :class:`ReactionEmoji` for a custom guild emoji.

        Accepts either an object exposing ``name`` and ``id`` (such as a
        guild emoji model) or the name and ID directly.

        Raises
        -------
        TypeError
            The name or ID was of the wrong type.
        InvalidArgument
            The ID was ``0``, which is reserved for unicode emoji, or did not fit in 64 bits,
            or the name contains whitespace, colons or angle brackets.
        """
        if id is MISSING:
            if not isinstance(emoji, GuildEmojiLike):
                raise TypeError(f'expected an emoji with a name and id not {emoji.__class__.__name__}')
            name, id = emoji.name, emoji.id
        else:
            name = emoji

        self = cls(name=name, id=id)
        if self._id == 0:
            raise InvalidArgument(f'guild emoji {name!r} must have a nonzero id')
        return self

    @classmethod
    def from_unicode(cls, unicode: str) -> Self:
        """Constructs a :class:`ReactionEmoji` from the given unicode emoji."""
        if not isinstance(unicode, str):
            raise TypeError(f'expected str not {unicode.__class__.__name__}')

        return cls(name=unicode)

    @classmethod
    def from_dict(cls, data: PartialEmojiPayload) -> Self:
        """Constructs a :class:`ReactionEmoji` from a partial emoji payload.

        A missing or null ``id`` means a unicode emoji. Custom emoji whose
        name the API no longer knows get an empty name.
        """
        emoji_id = utils.get_as_snowflake(data, 'id')
        if emoji_id:
            return cls.from_guild_emoji(data.get('name') or '', emoji_id)
        return cls.from_unicode(data.get('name') or '')

    @classmethod
    def from_str(cls, value: str) -> Self:
        """Converts a reaction string into a :class:`ReactionEmoji`.

        The following formats are parsed as guild emoji:

        - ``<name:id>``
        - ``<:name:id>``
        - ``<a:name:id>``

        Anything else is taken to be a unicode emoji.
        """
        match = CUSTOM_EMOJI_RE.fullmatch(value)
        if match is not None:
            _animated, name, emoji_id = match.groups()
            return cls.from_guild_emoji(name, int(emoji_id))
        return cls.from_unicode(value)

    def to_dict(self) -> PartialEmojiPayload:
        return {
            'name': self._name,
            'id': None if self.is_unicode() else str(self._id),
        }

    def __str__(self) -> str:
        if self.is_unicode():
            return self._name
        return f'<{self._name}:{self._id}>'

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} name={self._name!r} id={self._id}>'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReactionEmoji):
            return False
        return self._name == other._name and self._id == other._id

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((self._name, self._id))

    @property
    def name(self) -> str:
        """:class:`str`: The name of the emoji, or the unicode character(s)."""
        return self._name

    @property
    def id(self) -> int:
        """:class:`int`: The unsigned ID of the emoji, ``0`` for unicode emoji."""
        return self._id

    def is_unicode(self) -> bool:
        """:class:`bool`: Checks if this is a unicode emoji."""
        return self._id == 0

    def is_custom_emoji(self) -> bool:
        """:class:`bool`: Checks if this is a custom guild emoji."""
        return self._id != 0

    @property
    def created_at(self) -> Optional[datetime.datetime]:
        """Optional[:class:`datetime.datetime`]: When the guild emoji was created, in UTC.

        ``None`` for unicode emoji.
        """
        if self.is_unicode():
            return None
        return utils.snowflake_time(self._id)

    def _as_reaction(self) -> str:
        if self.is_unicode():
            return self._name
        return f'{self._name}:{self._id}'
