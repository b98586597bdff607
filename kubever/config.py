"""Process-level configuration.

Environment variables are read once, at the process boundary, into an
immutable ``Settings`` value which is then passed to the components that need
it. Nothing below ``kubever.versioning`` reads ``os.environ`` itself.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

DEFAULT_TOOL_ORG = 'kubernetes'
DEFAULT_TOOL_REPO = 'release'
DEFAULT_TOOL_BRANCH = 'master'
DEFAULT_VERSION_BASE_URL = 'https://dl.k8s.io'
DEFAULT_SERVICE_VERSION = '0.1.0'


@dataclass(frozen=True)
class Settings:
    tool_org: str = DEFAULT_TOOL_ORG
    tool_repo: str = DEFAULT_TOOL_REPO
    tool_branch: str = DEFAULT_TOOL_BRANCH
    build_root: str = '.'
    version_base_url: str = DEFAULT_VERSION_BASE_URL
    fetch_timeout: float = 10.0
    log_level: str = 'INFO'
    log_file: Optional[str] = None
    log_max_bytes: int = 5 * 1024 * 1024
    log_backup_count: int = 5
    rate_limit: str = '60 per minute'
    rate_limit_storage: str = 'memory://'
    service_version: str = DEFAULT_SERVICE_VERSION


def _get(env: Mapping[str, str], name: str, default: str) -> str:
    # empty values count as unset
    value = env.get(name)
    return value if value else default


def _get_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(name, f'expected an integer, got {raw!r}') from None


def _get_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(name, f'expected a number, got {raw!r}') from None
    if value <= 0:
        raise ConfigurationError(name, 'must be greater than zero')
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build ``Settings`` from the environment (or an explicit mapping)."""
    env = os.environ if environ is None else environ
    return Settings(
        tool_org=_get(env, 'TOOL_ORG', DEFAULT_TOOL_ORG),
        tool_repo=_get(env, 'TOOL_REPO', DEFAULT_TOOL_REPO),
        tool_branch=_get(env, 'TOOL_BRANCH', DEFAULT_TOOL_BRANCH),
        build_root=_get(env, 'KUBEVER_BUILD_ROOT', os.getcwd()),
        version_base_url=_get(env, 'KUBEVER_VERSION_BASE_URL', DEFAULT_VERSION_BASE_URL).rstrip('/'),
        fetch_timeout=_get_float(env, 'KUBEVER_FETCH_TIMEOUT', 10.0),
        log_level=_get(env, 'KUBEVER_LOG_LEVEL', 'INFO').upper(),
        log_file=env.get('KUBEVER_LOG_FILE') or None,
        log_max_bytes=_get_int(env, 'KUBEVER_LOG_MAX_BYTES', 5 * 1024 * 1024),
        log_backup_count=_get_int(env, 'KUBEVER_LOG_BACKUP_COUNT', 5),
        rate_limit=_get(env, 'KUBEVER_RATE_LIMIT', '60 per minute'),
        rate_limit_storage=_get(env, 'KUBEVER_RATE_LIMIT_STORAGE', 'memory://'),
        service_version=_get(env, 'KUBEVER_VERSION', DEFAULT_SERVICE_VERSION),
    )
