#!/usr/bin/env python3

import fnmatch
from typing import List, Optional, Tuple

from openai import AzureOpenAI, OpenAIError

from diff_review.config import ReviewConfig
from diff_review.models import (
    FileChange,
    Hunk,
    HunkReview,
    ModelResponseError,
    PRDetails,
    ReviewComment,
    parse_hunk_reviews,
)
from diff_review.prompts import create_prompts


def _match_parts(path_parts: List[str], pattern_parts: List[str]) -> bool:
    if not pattern_parts:
        return not path_parts

    head, rest = pattern_parts[0], pattern_parts[1:]
    if head == "**":
        return any(_match_parts(path_parts[i:], rest) for i in range(len(path_parts) + 1))

    return (
        bool(path_parts)
        and fnmatch.fnmatchcase(path_parts[0], head)
        and _match_parts(path_parts[1:], rest)
    )


def path_matches(file_path: str, pattern: str) -> bool:
    """
    Matches a repository path against a glob, one path segment at a time.

    "*" stays inside a segment and "**" spans zero or more directories,
    so "**/*.md" matches both "README.md" and "docs/guide.md".

    Args:
        file_path: Slash separated path relative to the repository root
        pattern: Glob pattern

    Returns:
        True if the whole path matches the pattern
    """
    return _match_parts(file_path.split("/"), pattern.split("/"))


class AICodeReviewer:
    """AI-powered code reviewer using Azure OpenAI."""

    def __init__(self, config: ReviewConfig, client: Optional[AzureOpenAI] = None):
        self.config = config
        self.exclude_patterns = list(config.exclude_patterns)
        self.deployment = config.azure_openai_deployment
        self.max_tokens = config.max_tokens
        self.client = client or AzureOpenAI(
            azure_endpoint=config.azure_openai_endpoint,
            api_key=config.openai_api_key,
            api_version=config.azure_openai_api_version,
            max_retries=0
        )

    def can_review_file(self, file_path: str) -> bool:
        """
        Determine if the file is outside every exclude pattern.

        Args:
            file_path: Path to the file in the repository

        Returns:
            True if this reviewer can review the file, False otherwise
        """
        return not any(path_matches(file_path, pattern) for pattern in self.exclude_patterns)

    def review_files(self, files: List[FileChange], pr_details: PRDetails) -> List[ReviewComment]:
        """
        Review every hunk of every reviewable file, one request at a time.

        Args:
            files: Parsed diff files
            pr_details: Pull request details

        Returns:
            Comments accumulated across all files and hunks
        """
        print("Starting code analysis...")
        comments = []

        for file_change in files:
            if file_change.is_deleted:
                continue

            file_path = file_change.destination
            if not self.can_review_file(file_path):
                print(f"Excluding file: {file_path}")
                continue

            print(f"\nProcessing file: {file_path}")
            for hunk in file_change.hunks:
                reviews = self.review_hunk(file_change, hunk, pr_details)
                if reviews:
                    comments.extend(self.create_comments(file_change, reviews))

        print(f"Final comments list: {len(comments)} items")
        return comments

    def review_hunk(self, file_change: FileChange, hunk: Hunk, pr_details: PRDetails) -> Optional[List[HunkReview]]:
        prompts = create_prompts(file_change, hunk, pr_details)
        return self.get_ai_response(prompts)

    def get_ai_response(self, prompts: Tuple[str, str, str]) -> Optional[List[HunkReview]]:
        """
        Sends the prompts to Azure OpenAI and decodes the reply.

        Args:
            prompts: Review rules, output format and user content

        Returns:
            Decoded reviews, or None when the request or decoding failed
        """
        review_rules, output_format, user_content = prompts
        messages = [
            {"role": "system", "content": review_rules},
            {"role": "system", "content": output_format},
            {"role": "user", "content": user_content},
        ]

        try:
            response = self.client.chat.completions.create(
                model=self.deployment,
                messages=messages,
                max_tokens=self.max_tokens,
            )
            content = response.choices[0].message.content if response.choices else None
            return parse_hunk_reviews((content or "").strip() or "[]")

        except OpenAIError as e:
            print(f"Error during Azure OpenAI API call: {e}")
            return None
        except ModelResponseError as e:
            print(f"Discarding review reply: {e}")
            return None

    def create_comments(self, file_change: FileChange, reviews: List[HunkReview]) -> List[ReviewComment]:
        """
        Creates comment objects from AI responses.

        Line numbers are taken from the model as-is.

        Args:
            file_change: File the reviews belong to
            reviews: Decoded model reviews

        Returns:
            List of comments
        """
        if not file_change.destination:
            return []

        return [
            ReviewComment(path=file_change.destination, line=review.lineNumber, body=review.reviewComment)
            for review in reviews
        ]
