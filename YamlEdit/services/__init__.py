"""
Service layer for the YamlEdit package.

This module provides the merge workflow used by the CLI, keeping argument
handling separate from document loading, merging and writing.
"""

from YamlEdit.services.merge_service import MergeService, MergeSource

__all__ = ['MergeService', 'MergeSource']
