"""
Path syntax for addressing values inside a Document.

Paths are always anchored at the root node and use a restricted, JSONPath-like
notation:

    $ or $.         the root node
    $.a.b.c         key "c" inside key "b" inside key "a"
    $.a\\.b         the single key "a.b" (a backslash escapes a literal dot)

A backslash also escapes itself (``\\\\`` is one literal backslash). A backslash
followed by any other character is kept as-is, so keys holding regular
expressions such as ``[^\\.]*`` can be written naturally. A lone backslash at
the very end of a path is malformed.

The same tokenizer is used to split paths and to build them from raw keys,
so ``parse_path(format_path(segments)) == segments`` for any segments except
the single empty segment ``['']``: its text is ``$.``, the root path. A
top-level empty key therefore cannot be addressed; empty keys further down
can (``$.a.`` ends with an empty key).
"""

from typing import List, Sequence

from YamlEdit.exceptions import InvalidPathError, UnsupportedPathError

ROOT = "$"
ROOT_PATH = "$."
SEPARATOR = "."
ESCAPE = "\\"

def parse_path(text: str) -> List[str]:
    """
    Split a textual path into its unescaped segments.

    Args:
        text: Path beginning at the root node, e.g. "$.oai.formats"

    Returns:
        List[str]: Segment names in traversal order (empty for the root path)

    Raises:
        UnsupportedPathError: If the path does not begin at the root node
        InvalidPathError: If the path is not a string or ends with a lone escape character

    Examples:
        >>> parse_path("$.a.b")
        ['a', 'b']
        >>> parse_path("$.a\\\\.b")
        ['a.b']
        >>> parse_path("$.")
        []
    """
    if not isinstance(text, str):
        raise InvalidPathError(f"Path must be a string, got {type(text).__name__}")

    if text == ROOT or text == ROOT_PATH:
        return []
    if not text.startswith(ROOT_PATH):
        raise UnsupportedPathError(
            f"Only paths beginning at the root node ($.) are supported: {text!r}",
            context={"path": text},
        )

    segments: List[str] = []
    current: List[str] = []
    chars = iter(text[len(ROOT_PATH):])
    for char in chars:
        if char == ESCAPE:
            escaped = next(chars, None)
            if escaped is None:
                raise InvalidPathError(
                    f"Path ends with an unfinished escape sequence: {text!r}",
                    context={"path": text},
                )
            if escaped in (SEPARATOR, ESCAPE):
                current.append(escaped)
            else:
                current.append(char + escaped)
        elif char == SEPARATOR:
            segments.append(''.join(current))
            current = []
        else:
            current.append(char)
    segments.append(''.join(current))
    return segments

def escape_segment(segment: str) -> str:
    """
    Escape a raw key so it can be embedded in a textual path.

    Args:
        segment: Raw key, possibly containing dots or backslashes

    Returns:
        str: The key with backslashes and dots escaped

    Example:
        >>> escape_segment("a.b")
        'a\\\\.b'
    """
    return segment.replace(ESCAPE, ESCAPE + ESCAPE).replace(SEPARATOR, ESCAPE + SEPARATOR)

def format_path(segments: Sequence[str]) -> str:
    """
    Build the textual path for a sequence of raw segments.

    ``['']`` formats as ``$.`` and so names the root, not a top-level empty key.
    """
    return ROOT_PATH + SEPARATOR.join(escape_segment(segment) for segment in segments)

def join_path(base: str, *segments: str) -> str:
    """
    Extend a textual path with raw (unescaped) segments.

    Args:
        base: Root-anchored path to extend
        *segments: Raw keys appended below `base`

    Returns:
        str: The extended textual path

    Example:
        >>> join_path("$.b", "x.y", "z")
        '$.b.x\\\\.y.z'
    """
    return format_path(parse_path(base) + list(segments))

def is_root_path(text: str) -> bool:
    """Check whether a textual path addresses the root node."""
    return parse_path(text) == []
