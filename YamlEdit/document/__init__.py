"""
YamlEdit document model.

This package provides the in-memory tree model for YAML/JSON data, the
restricted path syntax used to address values in it, and the recursive
merge of one tree into another.

Usage:
    from YamlEdit.document import Document

    doc = Document("a: {x: 1}")
    doc.set("$.a.y", 2)
    doc.merge({"b": [1, 2]}, "$.a")
"""

from YamlEdit.document.document import Document
from YamlEdit.document.merge import MergeEngine
from YamlEdit.document.path import ROOT_PATH, escape_segment, format_path, join_path, parse_path
from YamlEdit.document.tree import NodeKind, clone_tree, node_kind

__all__ = [
    "Document", "MergeEngine", "ROOT_PATH", "parse_path", "escape_segment",
    "format_path", "join_path", "NodeKind", "node_kind", "clone_tree",
]
