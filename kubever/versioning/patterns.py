"""Version grammars and the fixed build-output layout.

Release build (kube release) form:
    vMAJOR.MINOR.PATCH[.BUILD][-dirty]      e.g. v1.17.6.abcde-dirty

Semantic version form (semver.org 2.0.0):
    MAJOR.MINOR.PATCH[-PRERELEASE][+METADATA]  e.g. 1.14.11-beta.1.2+c8b135d0b49c44

Relative paths below are part of the build systems' output contract and are
not configurable.
"""

import re

# ============================================================================
# VERSION GRAMMARS
# ============================================================================

DIRTY_SUFFIX = '-dirty'

RELEASE_BUILD_PATTERN = re.compile(r'^v\d+\.\d+\.\d+(\.[0-9A-Za-z]+)?(-dirty)?$', re.ASCII)

SEMVER_PATTERN = re.compile(
    r'^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)'
    r'(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?'
    r'(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$',
    re.ASCII,
)

# ============================================================================
# BUILD OUTPUT LAYOUT
# ============================================================================

TARBALL_NAME = 'kubernetes.tar.gz'

# Legacy (Bazel) build system
BAZEL_BUILD_PATH = 'bazel-bin/build/release-tars'
BAZEL_VERSION_PATH = 'bazel-genfiles/version'

# New (dockerized make release) build system
DOCKER_BUILD_PATH = '_output/release-tars'
DOCKER_VERSION_MEMBER = 'kubernetes/version'
