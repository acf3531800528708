"""
AI pull request review bot.

Modules:
- main: reviews a pull request with Azure OpenAI and posts inline comments
- insertions: prints the inserted lines of a diff read from stdin
"""

__version__ = "1.0.0"
