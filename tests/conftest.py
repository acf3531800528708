import json
from types import SimpleNamespace

import pytest

from diff_review.config import ReviewConfig
from diff_review.models import PRDetails

SAMPLE_DIFF = """diff --git a/src/app.py b/src/app.py
index 83db48f..bf269f4 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,2 +1,2 @@
+foo
-bar
 baz
diff --git a/lib/util.py b/lib/util.py
index 1234567..89abcde 100644
--- a/lib/util.py
+++ b/lib/util.py
@@ -1,2 +1,3 @@ def helper():
 one
+two
 three
@@ -10,2 +11,2 @@
-ten
+TEN
 eleven
diff --git a/old.txt b/old.txt
deleted file mode 100644
index 1111111..0000000
--- a/old.txt
+++ /dev/null
@@ -1,2 +0,0 @@
-gone
-also gone
"""

DELETIONS_ONLY_DIFF = """diff --git a/notes.md b/notes.md
index 1111111..2222222 100644
--- a/notes.md
+++ b/notes.md
@@ -1,3 +1,2 @@
 keep
-drop
 keep too
"""


def _completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def completion():
    """Builds objects shaped like a chat completion response."""
    return _completion


@pytest.fixture
def sample_diff():
    return SAMPLE_DIFF


@pytest.fixture
def pr_details():
    return PRDetails("octo", "widgets", 42, "Add foo", "Replaces bar with foo")


@pytest.fixture
def event_file(tmp_path):
    def write(action="opened", **extra):
        payload = {
            "action": action,
            "number": 42,
            "repository": {"name": "widgets", "owner": {"login": "octo"}},
        }
        payload.update(extra)
        path = tmp_path / "event.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)
    return write


@pytest.fixture
def config():
    return ReviewConfig(
        github_token="gh-token",
        openai_api_key="openai-key",
        event_path="/tmp/event.json",
        event_name="pull_request",
    )


@pytest.fixture
def deletions_only_diff():
    return DELETIONS_ONLY_DIFF
