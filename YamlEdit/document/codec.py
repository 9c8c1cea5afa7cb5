"""
YAML and JSON encoding for YamlEdit documents.

This module wraps PyYAML and the json module. Decoding of inline text tries
JSON first and falls back to YAML; files are decoded by extension (``.json``
as JSON, anything else as YAML). Encoding always produces YAML.
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from YamlEdit.exceptions import ParseError, YamlEditError
from YamlEdit.utils.logging import get_logger

logger = get_logger(__name__)

# Canonical output: explicit document markers, insertion-ordered keys, block style
DEFAULT_DUMP_OPTIONS: Dict[str, Any] = {
    "explicit_start": True,
    "explicit_end": True,
    "default_flow_style": False,
    "allow_unicode": True,
    "indent": 2,
    "width": 80,
    "sort_keys": False,
}

def decode_text(text: str) -> Any:
    """
    Decode inline text as JSON, falling back to YAML.

    Args:
        text: JSON or YAML text

    Returns:
        Any: The decoded value (mapping, list or scalar)

    Raises:
        ParseError: If the text is neither valid JSON nor valid YAML
    """
    try:
        return json.loads(text)
    except ValueError:
        pass

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(
            f"Input is neither valid JSON nor valid YAML: {e}",
            context={"input": text[:200]},
            cause=e,
        ) from e

def load_file(path: Union[str, Path]) -> Any:
    """
    Read and decode a YAML or JSON file.

    Args:
        path: Path to the file

    Returns:
        Any: The decoded file content

    Raises:
        ParseError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix.lower() == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as e:
        raise ParseError(f"Failed to read {path}: {e}", context={"file": str(path)}, cause=e) from e
    except (ValueError, yaml.YAMLError) as e:
        raise ParseError(f"Failed to parse {path}: {e}", context={"file": str(path)}, cause=e) from e

    logger.debug(f"Loaded {path}")
    return data

def dump_yaml(data: Any, **options: Any) -> str:
    """
    Encode a tree as YAML text.

    Args:
        data: Tree to encode
        **options: Overrides for DEFAULT_DUMP_OPTIONS (any yaml.safe_dump keyword)

    Returns:
        str: YAML text

    Raises:
        YamlEditError: If the tree cannot be represented as YAML
    """
    dump_options = dict(DEFAULT_DUMP_OPTIONS)
    dump_options.update(options)
    try:
        return yaml.safe_dump(data, **dump_options)
    except yaml.YAMLError as e:
        raise YamlEditError(f"Failed to serialize document as YAML: {e}", cause=e) from e

def write_text_file(path: Union[str, Path], text: str) -> None:
    """
    Replace the content of a file with `text`.

    The text goes to a temporary file in the same directory which is then
    renamed over `path`, so the previous content stays intact if writing fails.
    An existing file keeps its permissions.

    Args:
        path: Destination file
        text: New file content

    Raises:
        YamlEditError: If the file cannot be written
    """
    path = Path(path)
    temp_path = None
    try:
        fd, temp_path = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(text)

        if path.exists():
            shutil.copymode(path, temp_path)
        else:
            # mkstemp creates private files; use the usual mode for new files
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(temp_path, 0o666 & ~umask)

        os.replace(temp_path, path)
    except OSError as e:
        if temp_path is not None and os.path.exists(temp_path):
            os.remove(temp_path)
        raise YamlEditError(f"Failed to write {path}: {e}", context={"file": str(path)}, cause=e) from e
    logger.debug(f"Wrote {len(text)} characters to {path}")
