"""
Input Sanitizer

Strips HTML-like tags and surrounding whitespace from user-supplied text
before it leaves the process.
"""
import re

TAG_PATTERN = re.compile(r"<[^>]*>")


def sanitize(text: str) -> str:
    """
    Remove every <...> substring, then trim.

    Idempotent: the output never contains a '<' followed by a '>'.
    """
    return TAG_PATTERN.sub("", text).strip()
