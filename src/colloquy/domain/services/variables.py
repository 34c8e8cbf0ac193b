"""Extraction of handlebar-style placeholder names from message content."""

import re
from typing import Any

HANDLEBAR_PATTERN = re.compile(r"\{\{\s*([^{}\s]+)\s*\}\}")


def extract_handlebar_variables(content: Any) -> tuple[str, ...]:
    """Return unique placeholder names found in *content*.

    Names are returned in order of first occurrence, duplicates collapse to a
    single entry. Both ``{{name}}`` and ``{{ name }}`` are recognised.

    Examples:
        >>> extract_handlebar_variables("Hi {{name}}, meet {{ friend }} and {{name}}")
        ('name', 'friend')
    """
    if not isinstance(content, str):
        return ()

    return tuple(dict.fromkeys(HANDLEBAR_PATTERN.findall(content)))
