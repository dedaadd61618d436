"""Reduces decoded text to the form used for duplicate comparison."""

import re

BYTE_ORDER_MARK = "\ufeff"

# ASCII whitespace, Unicode space separators and U+FEFF. U+001C-U+001F and U+0085
# are content, not whitespace.
_WHITESPACE_RE = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)


def canonicalize(text: str) -> str:
    """Return the canonical comparison form of ``text``.

    Steps, in order: unify line endings, drop all whitespace, lowercase,
    strip a leading byte-order mark. Files that differ only in formatting or
    letter case share a canonical form and are reported as duplicates.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _WHITESPACE_RE.sub("", text)
    text = text.lower()
    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK):]
    return text
