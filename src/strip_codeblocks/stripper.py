import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

# Opening fence, optional tag (no newline, no backtick), newline, then the
# shortest run up to the next ``` which closes the block.
FENCED_BLOCK_PATTERN = re.compile(r"```[^\n`]*\n(.*?)```", re.DOTALL)


@dataclass
class CodeBlock:
    language: Optional[str]
    content: str
    start: int
    end: int

    @property
    def span(self) -> Tuple[int, int]:
        return self.start, self.end


def strip_codeblocks(text: str) -> str:
    """Remove fenced code block delimiters, keeping the enclosed text.

    Every ```` ```lang\\n...``` ```` block is replaced by its raw content.
    Inline code spans (single or double backticks), unterminated fences and
    opening fences whose tag contains a backtick are copied through unchanged.
    The first ``` after an opening fence always closes the block.
    """
    if not text:
        return text
    return FENCED_BLOCK_PATTERN.sub(lambda match: match.group(1), text)


def find_codeblocks(text: str) -> List[CodeBlock]:
    """Return the blocks strip_codeblocks would replace, in order of appearance."""
    blocks: List[CodeBlock] = []
    for match in FENCED_BLOCK_PATTERN.finditer(text):
        header_end = match.start(1) - 1
        language = text[match.start() + 3:header_end].strip() or None
        blocks.append(
            CodeBlock(
                language=language,
                content=match.group(1),
                start=match.start(),
                end=match.end(),
            )
        )
    return blocks


def count_codeblocks(text: str) -> int:
    return len(find_codeblocks(text))
