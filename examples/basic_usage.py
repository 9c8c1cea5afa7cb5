#!/usr/bin/env python3
"""
Basic usage example for the YamlEdit module.
"""
import json

from YamlEdit import Document, PathNotFoundError

def print_json(data):
    """Print data as formatted JSON."""
    print(json.dumps(data, indent=2, ensure_ascii=False))

def main():
    """Main function."""
    # Documents can be created from YAML or JSON text, mappings or files
    doc = Document("""
service:
  name: api
  ports: [8080, 8443]
""")

    # Read values by path
    print("Reading $.service.ports...")
    print_json(doc.get("$.service.ports"))

    # Set values, creating missing objects on the way
    print("\nSetting $.service.env.LOG_LEVEL...")
    doc.set("$.service.env.LOG_LEVEL", "debug")
    print_json(doc.get("$.service"))

    # Keys containing dots are addressed with an escaped dot
    doc.set(r"$.annotations.example\.com/owner", "platform")
    print_json(doc.get(r"$.annotations.example\.com/owner"))

    # Missing paths raise unless a default is given
    try:
        doc.get("$.service.missing")
    except PathNotFoundError as e:
        print(f"\n{e.error_code}: {e.message}")
    print(doc.get("$.service.missing", "n/a"))

    # Merge a JSON fragment: objects merge, sequences replace
    print("\nMerging a JSON fragment...")
    leaves = doc.merge(Document('{"service": {"ports": [9090], "replicas": 3}}'))
    print(f"Merged {leaves} values")

    print("\nResulting document:")
    print(doc.dump(), end="")

if __name__ == '__main__':
    main()
