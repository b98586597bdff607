"""Resolve version markers published over HTTP.

Kubernetes publishes the current version of each release line as a one-line
text file, e.g. ``https://dl.k8s.io/release/stable-1.13.txt`` or
``https://dl.k8s.io/ci/latest-1.14.txt``.

Usage:
    resolver = RemoteVersionResolver(timeout=5)
    resolver.resolve(version_marker_url('stable', '1.13'), use_semver=True)
"""

import logging
from typing import Callable, Optional

import requests

from ..config import DEFAULT_VERSION_BASE_URL
from ..exceptions import FetchFailureError, InvalidArgumentError
from .validator import to_semver

logger = logging.getLogger('kubever.remote')

Fetcher = Callable[[str], str]

MARKER_KINDS = ('stable', 'latest')


def http_fetch(url: str, timeout: float = 10.0) -> str:
    """Return the body at ``url``; any transport or HTTP error is a FetchFailureError."""
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        return resp.text
    except requests.RequestException as exc:
        raise FetchFailureError(url, str(exc)) from exc


def version_marker_url(
    kind: str = 'stable',
    minor: Optional[str] = None,
    ci: bool = False,
    base_url: str = DEFAULT_VERSION_BASE_URL,
) -> str:
    """Build the URL of a published version marker.

    Args:
        kind: 'stable' or 'latest'
        minor: Release line such as '1.14'; None for the overall marker
        ci: Use the CI bucket instead of the release bucket
        base_url: Download host

    Returns:
        e.g. https://dl.k8s.io/ci/latest-1.14.txt
    """
    if kind not in MARKER_KINDS:
        raise InvalidArgumentError('kind', f"must be one of {', '.join(MARKER_KINDS)}")
    name = f'{kind}-{minor}' if minor else kind
    bucket = 'ci' if ci else 'release'
    return f"{base_url.rstrip('/')}/{bucket}/{name}.txt"


class RemoteVersionResolver:
    """Fetch a published version string, optionally coerced to semver.

    ``fetch`` is any callable taking a URL and returning the body text; it
    should raise FetchFailureError on failure. The default uses ``requests``.
    """

    def __init__(self, fetch: Optional[Fetcher] = None, timeout: float = 10.0):
        self.timeout = timeout
        self._fetch = fetch or self._http_fetch

    def _http_fetch(self, url: str) -> str:
        return http_fetch(url, timeout=self.timeout)

    def resolve(self, url: str, use_semver: bool = False) -> str:
        if not url:
            raise InvalidArgumentError('url')
        try:
            body = self._fetch(url)
        except FetchFailureError:
            logger.warning('version fetch failed url=%s', url)
            raise
        except (requests.RequestException, OSError) as exc:
            logger.warning('version fetch failed url=%s err=%s', url, exc)
            raise FetchFailureError(url, str(exc)) from exc
        version = body.strip()
        logger.debug('fetched version=%s url=%s', version, url)
        if use_semver:
            return to_semver(version)
        return version


def get_kube_version(url: str, use_semver: bool = False, fetch: Optional[Fetcher] = None) -> str:
    """Convenience wrapper around ``RemoteVersionResolver.resolve``."""
    return RemoteVersionResolver(fetch=fetch).resolve(url, use_semver)
