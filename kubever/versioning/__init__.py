"""Release Version Identity Module.

Answers three questions for a release pipeline: which build system produced
the release tarball under a build root, what version that build declares, and
whether a version string is a valid (possibly dirty) release build.

Architecture:
- patterns.py: Version grammars and fixed build-output paths
- validator.py: Release-build and semver validation
- provenance.py: Which build system produced the artifact
- readers.py: Version extraction (plain file or embedded in the tarball)
- remote.py: Published version markers over HTTP
"""

from .provenance import BuildProducer, ProvenanceResult, built_with_bazel, detect_build_producer
from .readers import BuildVersion, read_archive_version, read_build_version, read_legacy_version
from .remote import RemoteVersionResolver, get_kube_version, version_marker_url
from .validator import is_dirty_build, is_valid_release_build, is_valid_semver, to_semver

__all__ = [
    'BuildProducer',
    'BuildVersion',
    'ProvenanceResult',
    'RemoteVersionResolver',
    'built_with_bazel',
    'detect_build_producer',
    'get_kube_version',
    'is_dirty_build',
    'is_valid_release_build',
    'is_valid_semver',
    'read_archive_version',
    'read_build_version',
    'read_legacy_version',
    'to_semver',
    'version_marker_url',
]
