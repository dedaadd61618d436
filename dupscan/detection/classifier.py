"""Decides whether an uploaded file is text and so eligible for comparison."""

import re

TEXT_EXTENSIONS: tuple[str, ...] = (
    ".txt",
    ".js",
    ".ts",
    ".jsx",
    ".tsx",
    ".html",
    ".css",
    ".json",
    ".xml",
    ".md",
    ".py",
    ".java",
    ".cpp",
    ".c",
    ".h",
    ".php",
    ".rb",
    ".go",
    ".rs",
    ".swift",
    ".kt",
    ".scala",
    ".sh",
    ".yml",
    ".yaml",
    ".toml",
    ".ini",
    ".cfg",
    ".conf",
)

DEFAULT_NON_PRINTABLE_THRESHOLD = 0.1

# Control characters except \t \n \v \f \r, plus DEL and the Latin-1 high range.
_NON_PRINTABLE_RE = re.compile(r"[\x00-\x08\x0e-\x1f\x7f-\xff]")


def has_text_extension(filename: str) -> bool:
    return filename.lower().endswith(TEXT_EXTENSIONS)


def non_printable_ratio(content: str) -> float:
    """Share of characters in ``content`` that fall in the non-printable class."""
    if not content:
        return 0.0
    return len(_NON_PRINTABLE_RE.findall(content)) / len(content)


def is_text_file(
    filename: str,
    content: str,
    threshold: float = DEFAULT_NON_PRINTABLE_THRESHOLD,
) -> bool:
    """Return True if the file should be treated as text.

    Args:
        filename: Declared file name; only its suffix is inspected.
        content: Decoded file content.
        threshold: Files without a known text extension are accepted only
            when their non-printable ratio is strictly below this value.
    """
    if has_text_extension(filename):
        return True
    return non_printable_ratio(content) < threshold
