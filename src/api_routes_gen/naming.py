"""Identifier helpers for turning route path segments into names."""

import re

_SEPARATOR_RE = re.compile(r"(^.)|(\s+.)|(-.)")


def to_camel_case(text: str, upper: bool = False) -> str:
    """Convert a dash or space separated segment into camelCase.

    The whole text is lower-cased first, so ``getFromUser`` becomes
    ``getfromuser`` while ``get-from-user`` becomes ``getFromUser``.
    """
    text = _SEPARATOR_RE.sub(lambda m: m.group(0)[-1].upper(), text.lower())
    if upper or not text:
        return text
    return text[0].lower() + text[1:]
