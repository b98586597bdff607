"""Build artifact provenance detection.

Decides which build system most recently produced the release tarball under a
build root. Every candidate producer is a ``BuildProducer`` entry; the
detector stats each tarball once and keeps the most recent one. On equal
timestamps the producer with the higher ``priority`` wins, which keeps the
legacy Bazel build as the default whenever it is at least as current.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict, Any, List, NamedTuple, Optional, Sequence

from ..exceptions import IOFailureError, NotFoundError
from .patterns import BAZEL_BUILD_PATH, DOCKER_BUILD_PATH, TARBALL_NAME

logger = logging.getLogger('kubever.provenance')

BAZEL = 'bazel'
DOCKERIZED = 'dockerized'


class BuildProducer(NamedTuple):
    """A build system that may leave a release tarball under a build root."""

    name: str
    relpath: str  # tarball path relative to the build root
    priority: int  # tie-break; higher wins on equal timestamps


BUILD_PRODUCERS: List[BuildProducer] = [
    BuildProducer(BAZEL, os.path.join(BAZEL_BUILD_PATH, TARBALL_NAME), 1),
    BuildProducer(DOCKERIZED, os.path.join(DOCKER_BUILD_PATH, TARBALL_NAME), 0),
]


@dataclass
class ProvenanceResult:
    """Outcome of comparing the build outputs under a root."""

    producer: str
    tarball: str
    mtime: int  # whole seconds since the epoch

    @property
    def built_with_bazel(self) -> bool:
        return self.producer == BAZEL

    def to_dict(self) -> Dict[str, Any]:
        return {
            'producer': self.producer,
            'tarball': self.tarball,
            'mtime': self.mtime,
        }


def _stat_mtime(path: str) -> Optional[int]:
    """Return the file's mtime in whole seconds, or None when it does not exist."""
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as exc:
        raise IOFailureError(path, exc.strerror or str(exc)) from exc
    return int(st.st_mtime)


def detect_build_producer(
    root: str,
    producers: Sequence[BuildProducer] = BUILD_PRODUCERS,
) -> ProvenanceResult:
    """Report which build system produced the most recent tarball under ``root``.

    Args:
        root: Build root directory
        producers: Candidate build systems; defaults to Bazel and dockerized

    Returns:
        ProvenanceResult of the winning producer

    Raises:
        NotFoundError: none of the producers left a tarball under ``root``
        IOFailureError: a tarball exists but could not be stat'ed
    """
    best: Optional[ProvenanceResult] = None
    best_key = None
    for producer in producers:
        tarball = os.path.join(root, producer.relpath)
        mtime = _stat_mtime(tarball)
        if mtime is None:
            logger.debug('no %s output at %s', producer.name, tarball)
            continue
        key = (mtime, producer.priority)
        logger.debug('found %s output at %s mtime=%d', producer.name, tarball, mtime)
        if best_key is None or key > best_key:
            best = ProvenanceResult(producer=producer.name, tarball=tarball, mtime=mtime)
            best_key = key

    if best is None:
        raise NotFoundError(root, 'no release tarball from any known build system')
    logger.info('release tarball under %s built by %s', root, best.producer)
    return best


def built_with_bazel(root: str) -> bool:
    """True if the legacy Bazel build produced the current release tarball."""
    return detect_build_producer(root).built_with_bazel
