import re

# <name:id>, <:name:id> and the animated <a:name:id>, name may be empty
CUSTOM_EMOJI = r"<(?:(a)?:)?([^\s:<>]*):(\d+)>"

CUSTOM_EMOJI_RE = re.compile(CUSTOM_EMOJI)

INVALID_EMOJI_NAME_RE = re.compile(r"[\s:<>]")
