#!/usr/bin/env python3

import sys
import traceback
from typing import List, Optional

from diff_review.config import ReviewConfig, load_config
from diff_review.diff_parser import DiffParser
from diff_review.github_client import GitHubClient, load_event
from diff_review.models import ReviewComment
from diff_review.reviewer import AICodeReviewer


def review_pull_request(
        config: ReviewConfig,
        github: Optional[GitHubClient] = None,
        reviewer: Optional[AICodeReviewer] = None,
) -> List[ReviewComment]:
    """
    Reviews the pull request named by the CI event and publishes the comments.

    Args:
        config: Run configuration
        github: GitHub client, built from config when omitted
        reviewer: AI reviewer, built from config when omitted

    Returns:
        Comments that were published, empty when there was nothing to do
    """
    github = github or GitHubClient(config.github_token, config.github_api_url)

    event_data = load_event(config.event_path)
    pr_details = github.get_pr_details(event_data)
    print(f"Analyzing PR #{pr_details.pull_number} in repo {pr_details.owner}/{pr_details.repo}")

    action = event_data.get("action")
    if action == "opened":
        diff = github.get_diff(pr_details.owner, pr_details.repo, pr_details.pull_number)
    elif action == "synchronize":
        diff = github.get_compare_diff(
            pr_details.owner, pr_details.repo, event_data["before"], event_data["after"]
        )
    else:
        print(f"Unsupported event: {config.event_name}")
        return []

    if not diff:
        print("No diff found. Exiting.")
        return []

    parsed_files = DiffParser.parse_diff(diff)

    reviewer = reviewer or AICodeReviewer(config)
    comments = reviewer.review_files(parsed_files, pr_details)

    if comments:
        print(f"Creating {len(comments)} review comments")
        github.create_review(pr_details.owner, pr_details.repo, pr_details.pull_number, comments)
    else:
        print("No issues found to comment on. Great job!")

    return comments


def main():
    """Main function to execute the code review process."""
    print("Starting PR review bot...")

    try:
        config = load_config()

        missing_vars = config.missing_values()
        if missing_vars:
            print(f"Error: Missing required configuration values: {', '.join(missing_vars)}")
            sys.exit(1)

        review_pull_request(config)

    except Exception as e:
        print(f"Error in main execution: {str(e)}")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
