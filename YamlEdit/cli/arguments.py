"""
Grouping of yaml-edit command-line arguments into source declarations.

Source declarations are order-sensitive: every ``--src`` opens a new group and
the ``--srcPath`` / ``--targetPath`` flags that follow it belong to that group.
This cannot be expressed with ordinary repeated options, so the raw argument
list is grouped here.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from YamlEdit.exceptions import CliUsageError
from YamlEdit.services import MergeSource

SRC_FLAG = '--src'
PATH_FLAGS = {
    '--srcPath': 'src_path',
    '--targetPath': 'target_path',
}

USAGE = """\
yaml-edit [--src SRC [--srcPath PATH] [--targetPath PATH]]... TARGET_FILE

  --src SRC          source data to be merged with TARGET_FILE: a path to a
                     YAML or JSON file, a YAML string or a JSON string
  --srcPath PATH     optional path within the source data (if not provided
                     the whole source is used)
  --targetPath PATH  path to merge at in TARGET_FILE (if not provided the
                     merge is performed at the root element)
  TARGET_FILE        file to merge into (if it doesn't exist it is treated
                     as an empty document)

Paths start at the root node, e.g. $.a.b; write \\. for a literal dot in a key.

--help, --version and --log-level are recognized anywhere on the command
line. Put -- before the source arguments when a value is one of them, e.g.
yaml-edit -- --src --version out.yaml
"""

def _split_flag(arg: str) -> Tuple[str, Optional[str]]:
    if arg.startswith('--') and '=' in arg:
        flag, value = arg.split('=', 1)
        if flag == SRC_FLAG or flag in PATH_FLAGS:
            return flag, value
    return arg, None

def parse_source_groups(args: Sequence[str]) -> Tuple[List[MergeSource], str]:
    """
    Group raw arguments into source declarations and the target file.

    Args:
        args: Command-line arguments without the program name

    Returns:
        Tuple of (source declarations in order, target file)

    Raises:
        CliUsageError: On a path flag without a preceding --src, a path flag
            given twice for one source, a flag without a value, an unknown
            flag, more than one target file, no sources or no target file

    Example:
        >>> sources, target = parse_source_groups(
        ...     ['--src', 'a.yaml', '--targetPath', '$.b', 'out.yaml'])
        >>> sources[0].target_path, target
        ('$.b', 'out.yaml')
    """
    groups: List[Dict[str, str]] = []
    target_file: Optional[str] = None

    position = 0
    while position < len(args):
        flag, value = _split_flag(args[position])

        if flag == SRC_FLAG or flag in PATH_FLAGS:
            if value is None:
                position += 1
                if position >= len(args):
                    raise CliUsageError(f"{flag} requires a value")
                value = args[position]

            if flag == SRC_FLAG:
                groups.append({'src': value})
            elif not groups:
                raise CliUsageError(f"{flag} without matching {SRC_FLAG} argument")
            elif PATH_FLAGS[flag] in groups[-1]:
                raise CliUsageError(f"{flag} redeclared for one of sources")
            else:
                groups[-1][PATH_FLAGS[flag]] = value
        elif flag.startswith('--'):
            raise CliUsageError(f"unknown argument {flag}")
        elif target_file is not None:
            raise CliUsageError(f"unexpected argument {flag} (target file already given: {target_file})")
        else:
            target_file = flag

        position += 1

    if not groups:
        raise CliUsageError("No sources")
    if not target_file:
        raise CliUsageError("No target file")

    return [MergeSource(**group) for group in groups], target_file
