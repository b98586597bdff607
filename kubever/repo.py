"""Release tooling repository coordinates.

Pure string assembly; nothing here talks to git or GitHub.
"""

from typing import Optional

from .config import DEFAULT_TOOL_ORG, DEFAULT_TOOL_REPO, Settings

GITHUB_HTTPS = 'https://github.com'
GITHUB_SSH = 'git@github.com'


def get_repo_url(org: str, repo: str, use_ssh: bool = False) -> str:
    if use_ssh:
        return f'{GITHUB_SSH}:{org}/{repo}'
    return f'{GITHUB_HTTPS}/{org}/{repo}'


def get_tool_repo_url(org: str = '', repo: str = '', use_ssh: bool = False, settings: Optional[Settings] = None) -> str:
    """URL of the release tooling repo; empty org/repo use the configured ones."""
    settings = settings or Settings()
    return get_repo_url(org or settings.tool_org, repo or settings.tool_repo, use_ssh)


def get_default_tool_repo_url() -> str:
    return get_repo_url(DEFAULT_TOOL_ORG, DEFAULT_TOOL_REPO)


def get_tool_branch(settings: Optional[Settings] = None) -> str:
    return (settings or Settings()).tool_branch
