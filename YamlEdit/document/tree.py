"""
Tree model for YamlEdit documents.

A tree node is a plain JSON-like Python value:

- Object: a ``dict`` with string keys
- Sequence: a ``list`` of nodes
- Scalar: ``str``, ``int``, ``float``, ``bool``, ``None`` (and the other
  immutable scalars YAML can produce, e.g. dates)

Nothing else can enter a tree: sets, custom objects and the like are rejected
with a ParseError when they are copied in.

`clone_tree` is the one place where trees are copied. Every read from and
write into a Document goes through it, so two Documents never share
mutable sub-structure.
"""

import datetime
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict

from YamlEdit.exceptions import ParseError

SCALAR_TYPES = (str, int, float, bool, type(None), bytes, datetime.date)

class NodeKind(Enum):
    """The three shapes a tree node can take."""

    OBJECT = "object"
    SEQUENCE = "sequence"
    SCALAR = "scalar"

def node_kind(value: Any) -> NodeKind:
    """
    Classify a value as an object, a sequence or a scalar node.

    Mappings are objects, lists and tuples are sequences, everything else is a
    scalar. Strings are scalars even though they are iterable.
    """
    if isinstance(value, Mapping):
        return NodeKind.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR

def is_object(value: Any) -> bool:
    """Check whether a value is an object node."""
    return node_kind(value) is NodeKind.OBJECT

def normalize_key(key: Any) -> str:
    """
    Convert a mapping key to the string used to address it.

    Non-string keys are coerced the way JSON coerces them, so ``1`` becomes
    ``"1"``, ``True`` becomes ``"true"`` and ``None`` becomes ``"null"``.
    """
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    return str(key)

def clone_tree(value: Any) -> Any:
    """
    Deep-copy a value into a fresh tree.

    Mappings become plain dicts with string keys (insertion order kept),
    lists and tuples become lists, scalars are returned as they are since they
    are immutable.

    Args:
        value: The value to copy

    Returns:
        Any: A tree sharing no mutable state with `value`

    Raises:
        ParseError: If `value` holds anything that is not an object, a
            sequence or a scalar (e.g. a set or an arbitrary object)

    Example:
        >>> original = {'a': [1, {'b': 2}]}
        >>> copied = clone_tree(original)
        >>> copied['a'][1]['b'] = 3
        >>> original['a'][1]['b']
        2
    """
    kind = node_kind(value)
    if kind is NodeKind.OBJECT:
        result: Dict[str, Any] = {}
        for key, child in value.items():
            result[normalize_key(key)] = clone_tree(child)
        return result
    if kind is NodeKind.SEQUENCE:
        return [clone_tree(child) for child in value]
    if isinstance(value, SCALAR_TYPES):
        return value
    raise ParseError(
        f"Unsupported value type: {type(value).__name__}",
        context={"type": type(value).__name__},
    )
