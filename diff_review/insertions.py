#!/usr/bin/env python3
"""Prints the inserted lines of a unified diff read from stdin, grouped by file."""

import sys
from typing import Iterable, Iterator

from diff_review.diff_parser import DiffParser
from diff_review.models import FileChange


def file_header(path: str) -> str:
    """Returns the marker line printed before a file's insertions."""
    return f"+++++++++++ {path} ++++++++++++"


def iter_insertions_report(files: Iterable[FileChange]) -> Iterator[str]:
    """
    Yields the report one output line at a time.

    Args:
        files: Parsed diff files

    Returns:
        Iterator over lines without trailing newlines
    """
    for file_change in files:
        yield file_header(file_change.destination)

        inserted = [
            change.content
            for hunk in file_change.hunks
            for change in hunk.insertions
        ]
        if inserted:
            yield "\n".join(inserted)

        yield ""
        yield ""


def main():
    """Reads a diff from stdin and prints its insertions."""
    diff_text = sys.stdin.read()
    files = DiffParser.parse_diff(diff_text)

    for line in iter_insertions_report(files):
        print(line)


if __name__ == "__main__":
    main()
