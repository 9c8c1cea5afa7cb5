"""
Recursive merge of a tree into a Document.

Objects are merged key by key; scalars and sequences are leaves which replace
whatever the target holds at the same path. Every leaf is written with
`Document.set`, so missing intermediate objects are created on the way and
existing non-object values standing in the way are replaced.
"""

from typing import Any, Dict, List, TYPE_CHECKING

from YamlEdit.document.path import format_path, is_root_path, parse_path
from YamlEdit.document.tree import is_object
from YamlEdit.exceptions import InvalidPathError
from YamlEdit.utils.logging import get_logger

if TYPE_CHECKING:
    from YamlEdit.document.document import Document

logger = get_logger(__name__)

class MergeEngine:
    """
    Merges trees into a target Document.

    Attributes:
        target (Document): The document receiving merged values
        leaves_set (int): Number of leaves written by the last merge
    """

    def __init__(self, target: 'Document') -> None:
        self.target = target
        self.leaves_set = 0

    def merge(self, source: Any, path: str) -> int:
        """
        Merge a tree into the target at `path`.

        An object source is walked recursively. Any other source is a single
        leaf and is set at `path` as a whole, which is not possible at the root.

        Args:
            source: Tree to merge (plain dict, list or scalar)
            path: Root-anchored path to merge at

        Returns:
            int: Number of leaves written

        Raises:
            InvalidPathError: If a non-object source is merged at the root
        """
        self.leaves_set = 0
        if is_object(source):
            self._process_leaves(source, parse_path(path))
        elif is_root_path(path):
            raise InvalidPathError(
                f"Cannot merge a {type(source).__name__} value at the root node",
                context={"path": path},
            )
        else:
            self._set_leaf(path, source)
        return self.leaves_set

    def _process_leaves(self, node: Dict[str, Any], segments: List[str]) -> None:
        for key, value in node.items():
            if is_object(value):
                self._process_leaves(value, segments + [key])
            else:
                self._set_leaf(format_path(segments + [key]), value)

    def _set_leaf(self, path: str, value: Any) -> None:
        logger.debug(f"Merging leaf at {path}")
        self.target.set(path, value)
        self.leaves_set += 1
