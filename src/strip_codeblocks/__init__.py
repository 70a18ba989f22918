"""Strip markdown fenced code blocks while keeping their content."""

from strip_codeblocks.stripper import (
    FENCED_BLOCK_PATTERN,
    CodeBlock,
    count_codeblocks,
    find_codeblocks,
    strip_codeblocks,
)

__all__ = [
    "FENCED_BLOCK_PATTERN",
    "CodeBlock",
    "count_codeblocks",
    "find_codeblocks",
    "strip_codeblocks",
]

__version__ = "0.1.0"
