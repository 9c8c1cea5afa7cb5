"""
Document class for YamlEdit.

A Document owns one object-rooted tree decoded from YAML or JSON and offers
path-based access (get/set), recursive merging and YAML serialization.

Usage:
    from YamlEdit import Document

    target = Document("config.yaml")
    target.merge(Document('{"db": {"port": 5432}}').get("$.db"), "$.services.api")
    target.write_file("config.yaml")
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Union

from YamlEdit.document.codec import decode_text, dump_yaml, load_file, write_text_file
from YamlEdit.document.merge import MergeEngine
from YamlEdit.document.path import ROOT_PATH, format_path, parse_path
from YamlEdit.document.tree import clone_tree, is_object
from YamlEdit.exceptions import InvalidPathError, ParseError, PathNotFoundError
from YamlEdit.utils.logging import get_logger

logger = get_logger(__name__)

_MISSING = object()
_NOT_FOUND = object()

class Document:
    """
    A YAML/JSON document held fully in memory.

    The root is always an object (a dict), possibly empty. Documents have
    value semantics: constructing one from another Document or from a mapping,
    reading values with `get` and writing values with `set` all copy the data,
    so no two Documents ever share mutable structure.

    Accepted sources, checked in this order:
    - a Document: its tree is deep-copied
    - a mapping: deep-copied into a plain dict tree
    - a pathlib.Path or the path of an existing file: the file is decoded
    - None or an empty string: an empty document
    - any other string: decoded as JSON, or as YAML if it isn't valid JSON

    Attributes:
        _root (Dict[str, Any]): The document tree
    """

    def __init__(self, source: Any = None) -> None:
        """
        Create a document from any supported source.

        Args:
            source: Document, mapping, file path, JSON text or YAML text

        Raises:
            ParseError: If the source cannot be read or decoded, does not
                decode to a mapping, or is of an unsupported type
        """
        self._root: Dict[str, Any] = self._build_root(source)

    @classmethod
    def from_source(cls, source: Any = None) -> 'Document':
        """Create a document from any supported source (see the class docstring)."""
        return cls(source)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'Document':
        """
        Create a document from a YAML or JSON file.

        Args:
            path: Path to the file (``.json`` files are decoded as JSON)

        Raises:
            ParseError: If the file does not exist or cannot be decoded
        """
        path = Path(path)
        if not path.is_file():
            raise ParseError(f"File not found: {path}", context={"file": str(path)})
        return cls(path)

    @classmethod
    def from_text(cls, text: str) -> 'Document':
        """Create a document from JSON or YAML text, never treating it as a file path."""
        document = cls()
        document._root = cls._as_root(decode_text(text) if text else None, "text")
        return document

    @classmethod
    def _build_root(cls, source: Any) -> Dict[str, Any]:
        if isinstance(source, Document):
            return clone_tree(source._root)
        if isinstance(source, Mapping):
            return clone_tree(source)
        if isinstance(source, Path):
            return cls._as_root(load_file(source), str(source))
        if source is None or source == "":
            return {}
        if not isinstance(source, str):
            raise ParseError(
                f"Unsupported document source type: {type(source).__name__}",
                context={"type": type(source).__name__},
            )
        if os.path.isfile(source):
            return cls._as_root(load_file(source), source)
        return cls._as_root(decode_text(source), "text")

    @staticmethod
    def _as_root(data: Any, origin: str) -> Dict[str, Any]:
        if data is None:
            return {}
        if not is_object(data):
            raise ParseError(
                f"Document root must be a mapping, got {type(data).__name__} from {origin}",
                context={"origin": origin},
            )
        return clone_tree(data)

    def get(self, path: str = ROOT_PATH, default: Any = _MISSING) -> Any:
        """
        Get a copy of the value at a given path.

        Args:
            path: Root-anchored path (default: the whole document)
            default: Value to return instead of raising when the path doesn't exist

        Returns:
            Any: A deep copy of the value; mutating it never affects the document

        Raises:
            UnsupportedPathError: If the path does not begin at the root node
            PathNotFoundError: If the path doesn't exist and no default was given

        Examples:
            >>> doc = Document("a: {x: 1}")
            >>> doc.get("$.a.x")
            1
            >>> doc.get("$.a.y", None) is None
            True
        """
        segments = parse_path(path)

        node: Any = self._root
        for depth, segment in enumerate(segments):
            if not is_object(node) or segment not in node:
                if default is not _MISSING:
                    return default
                raise PathNotFoundError(
                    f"No such path: {path}",
                    context={"path": path, "missing": format_path(segments[:depth + 1])},
                )
            node = node[segment]

        return clone_tree(node)

    def has(self, path: str) -> bool:
        """Check whether a path exists in the document."""
        return self.get(path, _NOT_FOUND) is not _NOT_FOUND

    def set(self, path: str, value: Any, parse_text: bool = False) -> None:
        """
        Set the value at a given path, creating missing objects on the way.

        The walk follows existing objects as far as it can. From the first key
        that is missing or does not hold an object, new empty objects are
        created for every remaining segment but the last, replacing whatever
        was there. The last segment then receives a copy of `value`,
        overwriting any previous value.

        Args:
            path: Root-anchored path with at least one segment
            value: Value to store (Documents and mappings are stored as objects)
            parse_text: Decode string values as JSON or YAML before storing them

        Raises:
            UnsupportedPathError: If the path does not begin at the root node
            InvalidPathError: If the path is the root or ends with an empty segment
            ParseError: If `parse_text` is set and the text cannot be decoded

        Examples:
            >>> doc = Document()
            >>> doc.set("$.a.b.c", 1)
            >>> doc.get()
            {'a': {'b': {'c': 1}}}
        """
        segments = parse_path(path)
        if not segments:
            raise InvalidPathError("Cannot set the root node", context={"path": path})
        if segments[-1] == "":
            raise InvalidPathError(f"Path ends with an empty segment: {path}", context={"path": path})

        # Build the value before touching the tree so a failure leaves it unchanged
        if isinstance(value, Document):
            new_value = clone_tree(value._root)
        elif parse_text and isinstance(value, str):
            new_value = clone_tree(decode_text(value)) if value else value
        else:
            new_value = clone_tree(value)

        *parents, last = segments
        node = self._root
        depth = 0
        while depth < len(parents) and is_object(node.get(parents[depth])):
            node = node[parents[depth]]
            depth += 1

        for segment in parents[depth:]:
            node[segment] = {}
            node = node[segment]

        node[last] = new_value
        logger.debug(f"Set {path}")

    def merge(self, source: Any, path: str = ROOT_PATH) -> int:
        """
        Merge a value into the document at a given path.

        Objects are merged recursively: keys missing in the document are
        added, conflicting objects are merged, conflicting scalars are replaced.
        Sequences and scalars are leaves and always replace the existing value
        as a whole. A non-object `source` is one leaf set at `path`; strings are
        stored literally, not decoded.

        The merge is atomic: if any leaf fails, the document is left unchanged.

        Args:
            source: Document, mapping, or leaf value to merge
            path: Root-anchored path to merge at (default: the root node)

        Returns:
            int: Number of leaves written

        Raises:
            UnsupportedPathError: If the path does not begin at the root node
            InvalidPathError: If a leaf would land on an invalid path, e.g. a
                non-object source merged at the root

        Example:
            >>> doc = Document("a: {x: 9, z: 3}")
            >>> doc.merge({"a": {"x": 1, "y": 2}})
            2
            >>> doc.get("$.a")
            {'x': 1, 'z': 3, 'y': 2}
        """
        tree = source._root if isinstance(source, Document) else clone_tree(source)

        scratch = Document(self)
        leaves = MergeEngine(scratch).merge(tree, path)
        self._root = scratch._root

        logger.debug(f"Merged {leaves} leaves at {path}")
        return leaves

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the whole document tree."""
        return clone_tree(self._root)

    def dump(self, **options: Any) -> str:
        """
        Serialize the document as YAML.

        Args:
            **options: Overrides for the default YAML output options

        Returns:
            str: YAML text with explicit document start and end markers
        """
        return dump_yaml(self._root, **options)

    def write_file(self, path: Union[str, Path], **options: Any) -> None:
        """
        Write the document to a file as YAML.

        The text is fully serialized before the file is opened, so a
        serialization error never truncates an existing file.

        Args:
            path: Destination file, replaced if it exists
            **options: Overrides for the default YAML output options
        """
        write_text_file(path, self.dump(**options))
        logger.info(f"Wrote document to {path}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._root == other._root

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"Document({self._root!r})"
