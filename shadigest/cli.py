"""Command line: print the SHA-256 digest of each named file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from shadigest.core import hash_stream

NOT_FOUND = "file not found!"


def file_hash(path: str) -> str:
    """Digest of the file at ``path``, or a not-found message if it cannot be opened."""
    try:
        with open(path, "rb") as handle:
            return hash_stream(handle)
    except OSError:
        return NOT_FOUND


def main(argv: Sequence[str] | None = None) -> int:
    """Print ``name: digest`` for every file argument."""
    names = list(sys.argv[1:] if argv is None else argv)
    if not names:
        print("Atleast one file is required", file=sys.stderr)
        return 1
    for name in names:
        print(f"{name}: {file_hash(name)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())