"""
Input Sanitization Module

Cleans user-submitted meal fields before storage. HTML escaping happens
at render time through Jinja autoescaping, so it is not done here.
"""

import re

CONTROL_CHARS_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Strip whitespace and control characters and truncate.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = CONTROL_CHARS_RE.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_meal_name(name, max_length=200):
    """
    Sanitize a meal name for safe storage and display.

    Newlines and runs of whitespace collapse to a single space. Returns an
    empty string when nothing is left, so callers can reject it.
    """
    if not name:
        return ''

    if not isinstance(name, str):
        name = str(name)

    # Remove control characters, then collapse whitespace
    name = CONTROL_CHARS_RE.sub('', name)
    name = re.sub(r'\s+', ' ', name).strip()

    if len(name) > max_length:
        name = name[:max_length-3] + '...'

    return name


def sanitize_ingredients(text, max_length=2000):
    """
    Sanitize comma-delimited ingredient text.

    Commas and the spacing around them are left alone; splitting and
    trimming belong to the shopping list builder.
    """
    if not text:
        return ''

    text = re.sub(r'[\r\n\t]+', ' ', str(text))
    return sanitize_text(text, max_length=max_length)
