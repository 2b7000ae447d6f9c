"""
Service Registration

Adds dependency registrations to the BrowserServiceProvider block of a
Blazor Program.cs:

    var serviceProvider = new BrowserServiceProvider(services =>
    {
        // Add any custom services here
        services.AddSingleton<IWeather, Weather>();
    });

The block is found by a structural scan (call name, opening parenthesis,
lambda parameter, arrow, braces) rather than a single regular expression.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from bionic.scaffold.exceptions import PatchTargetError, RegistrarNotFoundError
from bionic.scaffold.logging_config import get_logger
from bionic.scaffold.patcher import LINE_END, TextDocument

logger = get_logger(__name__)

REGISTRAR_CALL = "BrowserServiceProvider"
INDENT = "    "


@dataclass(frozen=True)
class RegistrarBlock:
    """The statement block of the registrar lambda.

    start and end are offsets of the body in the file text, so that
    text[start:end] == body (the braces themselves are excluded).
    """
    registrar: str
    body: str
    start: int
    end: int


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _matching_brace(text: str, open_pos: int) -> Optional[int]:
    """Offset of the brace closing the one at open_pos."""
    depth = 0
    for pos in range(open_pos, len(text)):
        char = text[pos]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return pos
    return None


def _parse_call(text: str, pos: int) -> Optional[RegistrarBlock]:
    """Try to read `(<param> => { ... }` starting right after the call name."""
    pos = _skip_whitespace(text, pos)
    if pos >= len(text) or text[pos] != "(":
        return None

    arrow = text.find("=>", pos + 1)
    if arrow == -1:
        return None
    registrar = text[pos + 1:arrow].strip().strip("()").strip()
    if not registrar.isidentifier():
        return None

    open_brace = _skip_whitespace(text, arrow + 2)
    if open_brace >= len(text) or text[open_brace] != "{":
        return None

    close_brace = _matching_brace(text, open_brace)
    if close_brace is None:
        return None

    return RegistrarBlock(
        registrar=registrar,
        body=text[open_brace + 1:close_brace],
        start=open_brace + 1,
        end=close_brace,
    )


def find_registrar_block(text: str) -> Optional[RegistrarBlock]:
    """Locate the first BrowserServiceProvider lambda block in text.

    Returns:
        The block, or None if the file has no such construction
    """
    index = text.find(REGISTRAR_CALL)
    while index != -1:
        block = _parse_call(text, index + len(REGISTRAR_CALL))
        if block is not None:
            return block
        index = text.find(REGISTRAR_CALL, index + 1)
    return None


def registration_statement(registrar: str, service_name: str) -> str:
    """`services.AddSingleton<IName, Name>();`"""
    return f"{registrar}.AddSingleton<I{service_name}, {service_name}>();"


def add_statement(block: RegistrarBlock, statement: str) -> str:
    """Return the block body with statement inserted before its last line.

    The last line (usually just the indentation in front of the closing
    brace) stays last. A blank last line puts the statement one level
    deeper than it; otherwise the statement takes the last line's indent.
    Existing line endings are left as they are.
    """
    breaks = list(LINE_END.finditer(block.body))
    if breaks:
        last_break = breaks[-1]
        head = block.body[:last_break.end()]
        sentinel = block.body[last_break.end():]
        newline = last_break.group()
    else:
        newline = "\n"
        head = newline
        sentinel = block.body

    if sentinel.strip():
        indent = sentinel[:len(sentinel) - len(sentinel.lstrip())]
    else:
        indent = sentinel + INDENT

    return head + indent + statement + newline + sentinel


def register_service(source_file: Union[str, Path], service_name: str) -> str:
    """Register service_name in the registrar block of source_file.

    Not idempotent: registering the same name twice adds two statements.

    Args:
        source_file: Path to Program.cs
        service_name: Implementation class name; the interface is I + name

    Returns:
        The inserted statement

    Raises:
        RegistrarNotFoundError: If the file has no registrar block. The file
            is not modified.
        PatchTargetError: If the file cannot be read as UTF-8 text.
    """
    source_file = Path(source_file)
    if not source_file.is_file():
        raise RegistrarNotFoundError(
            f"Registrar block not found: {source_file} does not exist",
            source_file=source_file
        )

    try:
        document = TextDocument.read(source_file)
    except (OSError, UnicodeDecodeError) as e:
        raise PatchTargetError(f"Cannot read {source_file}", path=source_file, details=str(e))
    text = document.render()

    block = find_registrar_block(text)
    if block is None:
        raise RegistrarNotFoundError(
            f"Registrar block not found in {source_file}",
            source_file=source_file
        )

    statement = registration_statement(block.registrar, service_name)
    if statement in block.body:
        logger.warning("%s is already registered in %s; adding it again", service_name, source_file)

    new_text = text[:block.start] + add_statement(block, statement) + text[block.end:]
    TextDocument.parse(new_text, bom=document.bom).write(source_file)
    logger.debug("Registered %s in %s", service_name, source_file)
    return statement
