#!/usr/bin/env python3

from typing import Iterator, List

from unidiff import PatchSet
from unidiff.constants import RE_HUNK_HEADER
from unidiff.patch import PatchedFile, Hunk as PatchHunk

from diff_review.models import FileChange, Hunk, LineChange, DEV_NULL, INSERT, DELETE, CONTEXT


def _strip_prefix(path: str, prefix: str) -> str:
    if path.startswith(prefix):
        return path[len(prefix):]
    return path


class DiffParser:
    """Parser for Git diff output."""

    @staticmethod
    def parse_diff(diff_str: str) -> List[FileChange]:
        """
        Parses the diff string and returns a structured format.

        Args:
            diff_str: Git diff string

        Returns:
            List of FileChange objects, in diff order

        Raises:
            unidiff.UnidiffParseError: If the diff is malformed
        """
        patch = PatchSet(diff_str)
        # unidiff keeps only the parsed numbers, so raw headers are read in diff order
        headers = iter([line for line in diff_str.splitlines() if RE_HUNK_HEADER.match(line)])
        return [DiffParser._file_change(patched_file, headers) for patched_file in patch]

    @staticmethod
    def _file_change(patched_file: PatchedFile, headers: Iterator[str]) -> FileChange:
        source = patched_file.source_file
        if source != DEV_NULL:
            source = _strip_prefix(source, "a/")

        destination = patched_file.target_file
        if destination != DEV_NULL:
            destination = _strip_prefix(destination, "b/")

        hunks = [DiffParser._hunk(hunk, next(headers)) for hunk in patched_file]
        return FileChange(source, destination, hunks)

    @staticmethod
    def _hunk(hunk: PatchHunk, header: str) -> Hunk:
        changes = []
        for line in hunk:
            if line.is_added:
                kind = INSERT
            elif line.is_removed:
                kind = DELETE
            elif line.is_context:
                kind = CONTEXT
            else:
                # "\ No newline at end of file"
                continue

            changes.append(LineChange(
                kind=kind,
                content=line.value.rstrip("\r\n"),
                old_line=line.source_line_no,
                new_line=line.target_line_no,
            ))

        return Hunk(header, changes)
