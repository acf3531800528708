from diff_review.diff_parser import DiffParser
from diff_review.prompts import OUTPUT_FORMAT, REVIEW_RULES, create_prompts, format_hunk


def test_format_hunk_prefixes_resolved_line_numbers(sample_diff):
    hunk = DiffParser.parse_diff(sample_diff)[0].hunks[0]

    assert format_hunk(hunk) == "@@ -1,2 +1,2 @@\n1 +foo\n1 -bar\n2  baz"


def test_create_prompts(sample_diff, pr_details):
    file_change = DiffParser.parse_diff(sample_diff)[1]

    rules, output_format, user = create_prompts(file_change, file_change.hunks[1], pr_details)

    assert rules == REVIEW_RULES
    assert output_format == OUTPUT_FORMAT
    assert 'in the file "lib/util.py"' in user
    assert "Pull request title: Add foo" in user
    assert "---\nReplaces bar with foo\n---" in user
    assert "```diff\n@@ -10,2 +11,2 @@\n10 -ten\n11 +TEN\n12  eleven\n```" in user


def test_missing_description(sample_diff, pr_details):
    pr_details.description = None
    file_change = DiffParser.parse_diff(sample_diff)[0]

    _, _, user = create_prompts(file_change, file_change.hunks[0], pr_details)

    assert "---\n\n---" in user
    assert "None" not in user


def test_output_format_requests_json_array():
    assert '[{"lineNumber":' in OUTPUT_FORMAT
    assert '"reviewComment"' in OUTPUT_FORMAT
