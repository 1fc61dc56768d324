# marklist/core/patterns.py
# Regex patterns for item extraction

import re

# letter class w/o digits & underscore; matches Unicode letters (æ, ø, å, ...)
_LETTER = r"[^\W\d_]"

# * Item: a letter, then letters/spaces/periods/hyphens, ending in a letter or period
# a lone letter is also an item
ITEM_PATTERN = re.compile(rf"{_LETTER}(?:(?:{_LETTER}|[ .\-])*(?:{_LETTER}|\.))?")


# * First item in a plain string, or None
def find_item(text: str) -> str | None:
    match = ITEM_PATTERN.search(text)
    return match.group(0) if match else None
