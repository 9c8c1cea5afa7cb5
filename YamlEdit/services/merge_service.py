"""
Merge service module for the YamlEdit package.

This module runs a complete merge: load the target file (or start from an
empty document), extract a subtree from each source, merge it into the target
at the requested path, and finally write the target back.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, NamedTuple, Optional, Union

from YamlEdit.document import Document, ROOT_PATH
from YamlEdit.utils.logging import get_logger

# Get a logger for this module
logger = get_logger(__name__)

class MergeSource(NamedTuple):
    """One source to merge: where it comes from, what to take, where to put it."""

    src: str
    src_path: str = ROOT_PATH
    target_path: str = ROOT_PATH

class MergeService:
    """
    Service class for merging sources into a target file.

    Nothing is written until `write` is called, so a failing source leaves the
    target file untouched.
    """

    def __init__(self, target_file: Union[str, Path], dump_options: Optional[Dict[str, Any]] = None):
        """
        Initialize the MergeService.

        Args:
            target_file: File to merge into. A missing file is an empty document.
            dump_options: YAML output options used by `write`
        """
        self.target_file = Path(target_file)
        self.dump_options = dump_options or {}

        if self.target_file.exists():
            logger.debug(f"Loading target file {self.target_file}")
            self.document = Document.from_file(self.target_file)
        else:
            logger.debug(f"Target file {self.target_file} does not exist, starting from an empty document")
            self.document = Document()

    def merge_source(self, source: MergeSource) -> int:
        """
        Merge one source into the target document.

        Args:
            source: The source declaration

        Returns:
            Number of leaves written into the target

        Raises:
            ParseError: If the source cannot be loaded
            PathError: If either path is invalid or the source path doesn't exist
        """
        extracted = Document(source.src).get(source.src_path)
        leaves = self.document.merge(extracted, source.target_path)
        logger.info(f"Merged {source.src_path} of source into {source.target_path} ({leaves} values)")
        return leaves

    def merge_all(self, sources: Iterable[MergeSource]) -> Document:
        """Merge every source in order and return the resulting document."""
        for source in sources:
            self.merge_source(source)
        return self.document

    def write(self) -> None:
        """Write the target document back to the target file."""
        self.document.write_file(self.target_file, **self.dump_options)
