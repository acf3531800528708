#!/usr/bin/env python3

import json
from typing import List, Dict, Any, Optional

import requests
from github import Auth, Github

from diff_review.models import PRDetails, ReviewComment

DIFF_MEDIA_TYPE = "application/vnd.github.v3.diff"


def load_event(event_path: str) -> Dict[str, Any]:
    """
    Reads the GitHub Actions event payload.

    Args:
        event_path: Path from GITHUB_EVENT_PATH

    Returns:
        Decoded event payload
    """
    with open(event_path, "r", encoding="utf-8") as f:
        return json.load(f)


class GitHubClient:
    """Handles all interactions with GitHub API."""

    def __init__(self, github_token: str, base_url: str = "https://api.github.com"):
        """
        Initialize GitHub client with authentication token.

        Args:
            github_token: GitHub authentication token
            base_url: REST API root, differs on GitHub Enterprise Server
        """
        self.github_token = github_token
        self.base_url = base_url.rstrip("/")
        # Each request is attempted once
        self.gh = Github(auth=Auth.Token(github_token), base_url=self.base_url, retry=None)

    def _download_diff(self, url: str) -> str:
        headers = {
            'Authorization': f'Bearer {self.github_token}',
            'Accept': DIFF_MEDIA_TYPE
        }
        response = requests.get(url, headers=headers)
        response.raise_for_status()
        print(f"Retrieved diff length: {len(response.text)}")
        return response.text

    def get_pr_details(self, event_data: Dict[str, Any]) -> PRDetails:
        """
        Retrieves details of the pull request named by the event payload.

        Args:
            event_data: GitHub Actions event payload

        Returns:
            PRDetails object containing PR information
        """
        owner = event_data["repository"]["owner"]["login"]
        repo = event_data["repository"]["name"]
        pull_number = event_data["number"]

        pr = self.gh.get_repo(f"{owner}/{repo}").get_pull(pull_number)

        return PRDetails(owner, repo, pull_number, pr.title or "", pr.body or "")

    def get_diff(self, owner: str, repo: str, pull_number: int) -> str:
        """
        Fetches the full diff of the pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pull_number: Pull request number

        Returns:
            String containing the diff
        """
        print(f"Attempting to get diff for: {owner}/{repo} PR#{pull_number}")
        return self._download_diff(f"{self.base_url}/repos/{owner}/{repo}/pulls/{pull_number}")

    def get_compare_diff(self, owner: str, repo: str, base_sha: str, head_sha: str) -> Optional[str]:
        """
        Fetches the diff between two commits through the compare API.

        Args:
            owner: Repository owner
            repo: Repository name
            base_sha: Commit before the push
            head_sha: Commit after the push

        Returns:
            String containing the diff, or None when the comparison has no diff URL
        """
        print(f"Comparing {owner}/{repo} {base_sha}...{head_sha}")
        comparison = self.gh.get_repo(f"{owner}/{repo}").compare(base_sha, head_sha)

        if not comparison.diff_url:
            return None
        return self._download_diff(comparison.diff_url)

    def create_review(
            self,
            owner: str,
            repo: str,
            pull_number: int,
            comments: List[ReviewComment],
    ) -> None:
        """
        Submits all comments as a single review.

        Args:
            owner: Repository owner
            repo: Repository name
            pull_number: Pull request number
            comments: Comments to publish
        """
        print(f"Attempting to create {len(comments)} review comments")

        pr = self.gh.get_repo(f"{owner}/{repo}").get_pull(pull_number)
        review = pr.create_review(
            comments=[comment.to_dict() for comment in comments],
            event="COMMENT"
        )
        print(f"Review created successfully with ID: {review.id}")
