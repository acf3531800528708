#!/usr/bin/env python3

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

DEFAULT_AZURE_OPENAI_ENDPOINT = "https://southregiontesting.openai.azure.com"
DEFAULT_AZURE_OPENAI_DEPLOYMENT = "Test1"
DEFAULT_AZURE_OPENAI_API_VERSION = "2023-05-15"
DEFAULT_MAX_TOKENS = 700
DEFAULT_GITHUB_API_URL = "https://api.github.com"


@dataclass
class ReviewConfig:
    """Settings for a single review run."""
    github_token: str = ""
    openai_api_key: str = ""
    exclude_patterns: List[str] = field(default_factory=list)

    azure_openai_endpoint: str = DEFAULT_AZURE_OPENAI_ENDPOINT
    azure_openai_deployment: str = DEFAULT_AZURE_OPENAI_DEPLOYMENT
    azure_openai_api_version: str = DEFAULT_AZURE_OPENAI_API_VERSION
    max_tokens: int = DEFAULT_MAX_TOKENS

    event_path: str = ""
    event_name: Optional[str] = None
    github_api_url: str = DEFAULT_GITHUB_API_URL

    def missing_values(self) -> List[str]:
        """
        Lists the required settings that are unset or blank.

        Returns:
            Names of the missing settings, in a stable order
        """
        required = {
            "GITHUB_TOKEN": self.github_token,
            "OPENAI_API_KEY": self.openai_api_key,
            "GITHUB_EVENT_PATH": self.event_path,
        }
        return [name for name, value in required.items() if not value or not value.strip()]


def parse_exclude_patterns(raw: Optional[str]) -> List[str]:
    """
    Splits the comma separated exclude input into glob patterns.

    Args:
        raw: Value of INPUT_EXCLUDE, possibly empty

    Returns:
        Trimmed, non-empty patterns in input order
    """
    if not raw or not raw.strip():
        return []
    return [p.strip() for p in raw.split(",") if p.strip()]


def load_config(environ: Optional[Mapping[str, str]] = None) -> ReviewConfig:
    """
    Loads configuration from environment variables.

    GitHub Actions exposes action inputs as INPUT_<NAME> variables.

    Args:
        environ: Mapping to read from, defaults to os.environ

    Returns:
        ReviewConfig with defaults applied for unset optional values

    Raises:
        ValueError: If INPUT_MAX_TOKENS is not an integer
    """
    env = os.environ if environ is None else environ

    def get(*names: str, default: str = "") -> str:
        for name in names:
            value = env.get(name)
            if value:
                return value
        return default

    return ReviewConfig(
        # GitHub configuration
        github_token=get("INPUT_GITHUB_TOKEN", "GITHUB_TOKEN"),
        github_api_url=get("GITHUB_API_URL", default=DEFAULT_GITHUB_API_URL),
        event_path=get("GITHUB_EVENT_PATH"),
        event_name=env.get("GITHUB_EVENT_NAME"),

        # General configuration
        exclude_patterns=parse_exclude_patterns(env.get("INPUT_EXCLUDE", "")),

        # Azure OpenAI configuration
        openai_api_key=get("INPUT_OPENAI_API_KEY", "AZURE_OPENAI_KEY"),
        azure_openai_endpoint=get("AZURE_OPENAI_ENDPOINT", default=DEFAULT_AZURE_OPENAI_ENDPOINT),
        azure_openai_deployment=get("AZURE_OPENAI_DEPLOYMENT", default=DEFAULT_AZURE_OPENAI_DEPLOYMENT),
        azure_openai_api_version=get("AZURE_OPENAI_API_VERSION", default=DEFAULT_AZURE_OPENAI_API_VERSION),
        max_tokens=int(get("INPUT_MAX_TOKENS", default=str(DEFAULT_MAX_TOKENS))),
    )
