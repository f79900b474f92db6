from typing import Union

Snowflake = Union[str, int]
