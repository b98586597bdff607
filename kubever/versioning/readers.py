"""Read the declared version out of a build root.

Two storage encodings are supported:
- Bazel writes a plain text file (``bazel-genfiles/version``)
- the dockerized build embeds ``kubernetes/version`` in the release tarball

Readers never return partial data: either the full trimmed version string is
returned or an ``ArtifactError`` subclass is raised.
"""

import gzip
import logging
import os
import tarfile
import zlib
from dataclasses import dataclass
from typing import Dict, Any, Optional

from ..exceptions import CorruptArchiveError, IOFailureError, NotFoundError
from .patterns import BAZEL_VERSION_PATH, DOCKER_BUILD_PATH, DOCKER_VERSION_MEMBER, TARBALL_NAME
from .provenance import BAZEL, ProvenanceResult, detect_build_producer
from .validator import is_dirty_build, is_valid_release_build

logger = logging.getLogger('kubever.readers')


def read_legacy_version(root: str) -> str:
    """Read the version file written by the Bazel build.

    Args:
        root: Build root directory

    Returns:
        File content with surrounding whitespace removed (not validated)
    """
    path = os.path.join(root, BAZEL_VERSION_PATH)
    try:
        with open(path, 'r', encoding='utf-8') as fh:
            content = fh.read()
    except FileNotFoundError as exc:
        raise NotFoundError(path, 'version file not found') from exc
    except UnicodeDecodeError as exc:
        raise IOFailureError(path, f'version file is not valid UTF-8: {exc.reason}') from exc
    except OSError as exc:
        raise IOFailureError(path, exc.strerror or str(exc)) from exc
    version = content.strip()
    logger.debug('read bazel version=%s from %s', version, path)
    return version


def _member_matches(name: str) -> bool:
    if name.startswith('./'):
        name = name[2:]
    return name == DOCKER_VERSION_MEMBER


def read_archive_version(root: str) -> str:
    """Read the version member from the dockerized release tarball.

    The archive is streamed (gzip, then tar) and scanned member by member, so
    it does not need to be seekable or indexed. When the member is absent the
    rest of the gzip stream is drained first, so a truncated archive surfaces
    as corrupt rather than as a missing member.

    Args:
        root: Build root directory

    Returns:
        Member content with trailing whitespace removed

    Raises:
        NotFoundError: tarball or version member missing
        CorruptArchiveError: gzip/tar decoding failed
        IOFailureError: any other read error
    """
    path = os.path.join(root, DOCKER_BUILD_PATH, TARBALL_NAME)
    try:
        with open(path, 'rb') as fh, gzip.GzipFile(fileobj=fh, mode='rb') as gz:
            with tarfile.open(fileobj=gz, mode='r|') as tar:
                for member in tar:
                    if not (member.isfile() and _member_matches(member.name)):
                        continue
                    data = tar.extractfile(member).read()
                    version = data.decode('utf-8').rstrip()
                    logger.debug('read dockerized version=%s from %s', version, path)
                    return version
            # tar can end quietly on a block boundary; the gzip trailer cannot
            while gz.read(65536):
                pass
    except FileNotFoundError as exc:
        raise NotFoundError(path, 'release tarball not found') from exc
    except (tarfile.TarError, gzip.BadGzipFile, zlib.error, EOFError, UnicodeDecodeError) as exc:
        logger.warning('corrupt release tarball %s err=%s', path, exc)
        raise CorruptArchiveError(path, str(exc) or type(exc).__name__) from exc
    except OSError as exc:
        raise IOFailureError(path, exc.strerror or str(exc)) from exc
    raise NotFoundError(f'{path}:{DOCKER_VERSION_MEMBER}', 'version member not found in archive')


@dataclass
class BuildVersion:
    """Version declared by the build that produced the current release tarball."""

    producer: str
    version: str
    provenance: Optional[ProvenanceResult] = None

    @property
    def valid_release_build(self) -> bool:
        return is_valid_release_build(self.version)

    @property
    def dirty(self) -> bool:
        return is_dirty_build(self.version)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'producer': self.producer,
            'version': self.version,
            'valid_release_build': self.valid_release_build,
            'dirty': self.dirty,
            'provenance': self.provenance.to_dict() if self.provenance else None,
        }


def read_build_version(root: str) -> BuildVersion:
    """Detect the producing build system, then read its declared version."""
    provenance = detect_build_producer(root)
    if provenance.producer == BAZEL:
        version = read_legacy_version(root)
    else:
        version = read_archive_version(root)
    return BuildVersion(producer=provenance.producer, version=version, provenance=provenance)
