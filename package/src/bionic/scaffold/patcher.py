"""
Anchor Patcher

Line-oriented insertion of text blocks next to an anchor line. A file is
read once into a TextDocument, the first line starting with the anchor is
located, the block is spliced in and the document is written back.

Files are written back byte-for-byte apart from the inserted lines: the
line endings, trailing newline and UTF-8 BOM of the original are kept.
"""

import codecs
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from bionic.scaffold.exceptions import PatchTargetError
from bionic.scaffold.logging_config import get_logger

logger = get_logger(__name__)

LINE_END = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class PatchTarget:
    """Where and what to insert."""
    path: Path
    anchor: str
    block: str
    insert_after: bool = True


@dataclass
class TextDocument:
    """A text file as a list of lines plus the details needed to rebuild it.

    Every line keeps its own terminator in endings, so files with mixed line
    endings render back unchanged. Only the last line may have an empty
    terminator. Inserted lines use newline, the file's first terminator.
    """
    lines: List[str] = field(default_factory=list)
    endings: List[str] = field(default_factory=list)
    newline: str = "\n"
    bom: bool = False

    @property
    def trailing_newline(self) -> bool:
        return bool(self.endings) and self.endings[-1] != ""

    @classmethod
    def parse(cls, text: str, bom: bool = False) -> "TextDocument":
        lines, endings = [], []
        pos = 0
        for match in LINE_END.finditer(text):
            lines.append(text[pos:match.start()])
            endings.append(match.group())
            pos = match.end()
        if pos < len(text):
            lines.append(text[pos:])
            endings.append("")
        newline = endings[0] if endings and endings[0] else "\n"
        return cls(lines=lines, endings=endings, newline=newline, bom=bom)

    @classmethod
    def read(cls, path: Path) -> "TextDocument":
        raw = path.read_bytes()
        bom = raw.startswith(codecs.BOM_UTF8)
        return cls.parse(raw.decode("utf-8-sig"), bom=bom)

    def render(self) -> str:
        return "".join(line + ending for line, ending in zip(self.lines, self.endings))

    def write(self, path: Path):
        data = self.render().encode("utf-8")
        if self.bom:
            data = codecs.BOM_UTF8 + data
        path.write_bytes(data)

    def find_anchor(self, anchor: str) -> Optional[int]:
        """Index of the first line starting with anchor, or None."""
        for index, line in enumerate(self.lines):
            if line.startswith(anchor):
                return index
        return None

    def insert_block(self, index: int, block: str, insert_after: bool = True):
        """Insert block next to the line at index.

        A block containing newlines becomes several lines.
        """
        block_lines = LINE_END.split(block)
        block_endings = [self.newline] * len(block_lines)
        position = index + 1 if insert_after else index
        if position == len(self.lines) and not self.trailing_newline:
            # appending after an unterminated last line
            self.endings[-1] = self.newline
            block_endings[-1] = ""
        self.lines[position:position] = block_lines
        self.endings[position:position] = block_endings


def patch_file(
    path: Union[str, Path],
    anchor: str,
    block: str,
    insert_after: bool = True
) -> bool:
    """Insert block before or after the first line starting with anchor.

    Args:
        path: File to patch
        anchor: Literal line prefix
        block: Text to insert; may span several lines
        insert_after: Insert after the anchor line (default) or before it

    Returns:
        True if the file was changed, False if the anchor was not found
        (the file is not written in that case)
    """
    path = Path(path)
    if not path.is_file():
        raise PatchTargetError(f"Cannot patch {path}: file not found", path=path)

    try:
        document = TextDocument.read(path)
    except (OSError, UnicodeDecodeError) as e:
        raise PatchTargetError(f"Cannot read {path}", path=path, details=str(e))

    index = document.find_anchor(anchor)
    if index is None:
        logger.warning("Anchor %r not found in %s; file left unchanged", anchor, path)
        return False

    document.insert_block(index, block, insert_after)
    try:
        document.write(path)
    except OSError as e:
        raise PatchTargetError(f"Cannot write {path}", path=path, details=str(e))
    logger.debug(
        "Inserted %d line(s) %s line %d of %s",
        block.count("\n") + 1, "after" if insert_after else "before", index + 1, path
    )
    return True


def apply_patch(target: PatchTarget) -> bool:
    """Apply a PatchTarget. See patch_file."""
    return patch_file(target.path, target.anchor, target.block, target.insert_after)
