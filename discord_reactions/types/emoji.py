from typing import Optional, TypedDict

from typing_extensions import NotRequired

from .snowflake import Snowflake


class PartialEmoji(TypedDict):
    id: Optional[Snowflake]
    name: Optional[str]
    animated: NotRequired[bool]


class Reaction(TypedDict):
    count: int
    me: bool
    emoji: PartialEmoji
