#!/usr/bin/env python3

from typing import Tuple

from diff_review.models import FileChange, Hunk, PRDetails

REVIEW_RULES = """You are a code analyzer and experienced software developer. Your task is to review pull requests. Instructions:
- Do not give positive comments or compliments.
- Provide comments and suggestions ONLY if there is something to improve, otherwise return an empty array.
- Write the comment in GitHub Markdown format.
- Use the given description only for the overall context and only comment the code.
- Check your comment to make sure it is correct.
- IMPORTANT: Do not make assumptions about what the code is supposed to do, only suggest improvements in syntax, keeping in mind the best practices of the language of the file.
- DO NOT suggest linting or formatting changes.
- IMPORTANT: NEVER suggest adding comments to the code.
- Point out any code smells in the block, but only after you understand exactly what the code does. If unsure, omit any comments about that line.
"""

OUTPUT_FORMAT = (
    'Provide the response in following JSON format:  '
    '[{"lineNumber":  <line_number>, "reviewComment": "<review comment>"}]'
)


def format_hunk(hunk: Hunk) -> str:
    """Renders the hunk header followed by each change prefixed with its line number."""
    lines = [hunk.header]
    lines.extend(
        f"{change.line_number} {change.marker}{change.content}"
        for change in hunk.changes
    )
    return "\n".join(lines)


def create_prompts(file_change: FileChange, hunk: Hunk, pr_details: PRDetails) -> Tuple[str, str, str]:
    """
    Creates the system, output format and user prompts for one hunk.

    Args:
        file_change: File the hunk belongs to
        hunk: Hunk from the diff
        pr_details: Pull request details

    Returns:
        Tuple of (review rules, output format, user content)
    """
    user_prompt = f"""Review the following code diff in the file "{file_change.destination}" and take the pull request title and description into account when writing the response.
Pull request title: {pr_details.title}

Pull request description:
---
{pr_details.description or ''}
---

Git diff to review:

```diff
{format_hunk(hunk)}
```
"""
    return REVIEW_RULES, OUTPUT_FORMAT, user_prompt
