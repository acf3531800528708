#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

DEV_NULL = "/dev/null"

INSERT = "insert"
DELETE = "delete"
CONTEXT = "context"

MARKERS = {INSERT: "+", DELETE: "-", CONTEXT: " "}


class ModelResponseError(Exception):
    """Raised when a model reply is not a list of line reviews."""

    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw


@dataclass
class PRDetails:
    """Data class for pull request details."""
    owner: str
    repo: str
    pull_number: int
    title: str
    description: Optional[str] = None


@dataclass
class LineChange:
    """One line of a hunk, without its diff marker."""
    kind: str
    content: str
    old_line: Optional[int] = None
    new_line: Optional[int] = None

    @property
    def line_number(self) -> Optional[int]:
        return self.new_line if self.new_line is not None else self.old_line

    @property
    def marker(self) -> str:
        return MARKERS[self.kind]

    @property
    def is_insert(self) -> bool:
        return self.kind == INSERT


@dataclass
class Hunk:
    """Data class for a single hunk of a file diff."""
    header: str
    changes: List[LineChange] = field(default_factory=list)

    @property
    def insertions(self) -> List[LineChange]:
        return [change for change in self.changes if change.is_insert]


@dataclass
class FileChange:
    """Data class for a changed file in a PR."""
    source: str
    destination: str
    hunks: List[Hunk] = field(default_factory=list)

    @property
    def is_deleted(self) -> bool:
        return self.destination == DEV_NULL


@dataclass
class ReviewComment:
    """An inline comment anchored to a line of the new file version."""
    path: str
    line: int
    body: str

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "line": self.line, "body": self.body}


class HunkReview(BaseModel):
    lineNumber: int = Field(..., description="The Line Number of the current code hunk")
    reviewComment: str = Field(..., description="The code review comment")


_hunk_reviews = TypeAdapter(List[HunkReview])


def parse_hunk_reviews(text: str) -> List[HunkReview]:
    """
    Decodes a model reply into line reviews.

    Args:
        text: Raw message content returned by the model

    Returns:
        List of HunkReview objects

    Raises:
        ModelResponseError: If the text is not JSON or does not match the schema
    """
    try:
        return _hunk_reviews.validate_json(text)
    except ValidationError as e:
        raise ModelResponseError(f"Invalid review reply: {e}", text) from e
