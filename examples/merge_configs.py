#!/usr/bin/env python3
"""
Example of merging several configuration sources into one file.

This does the same thing as:

    yaml-edit --src base.yaml \
              --src overrides.json --srcPath $.production --targetPath $.settings \
              merged.yaml
"""
import os
import tempfile

from YamlEdit import MergeService, MergeSource, YamlEditError

BASE = """
settings:
  debug: true
  database:
    host: localhost
    port: 5432
"""

OVERRIDES = '{"production": {"debug": false, "database": {"host": "db.internal"}}}'

def main():
    """Main function."""
    work_dir = tempfile.mkdtemp()
    base_file = os.path.join(work_dir, "base.yaml")
    overrides_file = os.path.join(work_dir, "overrides.json")
    target_file = os.path.join(work_dir, "merged.yaml")

    with open(base_file, "w") as f:
        f.write(BASE)
    with open(overrides_file, "w") as f:
        f.write(OVERRIDES)

    sources = [
        MergeSource(base_file),
        MergeSource(overrides_file, src_path="$.production", target_path="$.settings"),
    ]

    try:
        service = MergeService(target_file)
        service.merge_all(sources)
        service.write()
    except YamlEditError as e:
        print(f"Merge failed: {e.user_message} ({e.message})")
        return

    with open(target_file) as f:
        print(f.read(), end="")

if __name__ == '__main__':
    main()
