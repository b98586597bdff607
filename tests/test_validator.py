"""Tests for kubever.versioning.validator — release build and semver checks."""
import pytest

from kubever.exceptions import InvalidVersionError, ValidationError
from kubever.versioning.validator import (
    is_dirty_build,
    is_valid_release_build,
    is_valid_semver,
    parse_semver,
    to_semver,
)


class TestIsValidReleaseBuild:
    @pytest.mark.parametrize('build', ['v1.17.6', 'v1.17.6.abcde', 'v1.17.6.abcde-dirty', 'v1.17.6-dirty'])
    def test_valid(self, build):
        assert is_valid_release_build(build) is True

    @pytest.mark.parametrize('build', [
        '1.1.1',  # no leading v
        'v1.17',
        'v1.17.6.',
        'v1.17.6.abc-de',
        'v1.17.6-beta.1',
        'v1.17.6-dirty\n',
        '',
        'v١.١٧.٦',  # Arabic-Indic digits
    ])
    def test_invalid(self, build):
        assert is_valid_release_build(build) is False


class TestIsDirtyBuild:
    def test_dirty(self):
        assert is_dirty_build('v1.17.6-dirty') is True

    def test_not_dirty(self):
        assert is_dirty_build('v1.17.6.abcde') is False

    def test_any_string_is_accepted(self):
        assert is_dirty_build('') is False
        assert is_dirty_build('-dirty') is True
        assert is_dirty_build('v1.17.6-dirty.1') is False


class TestSemver:
    def test_valid_semver(self):
        assert is_valid_semver('1.14.11-beta.1.2+c8b135d0b49c44')
        assert is_valid_semver('1.13.12')

    def test_leading_v_is_not_semver(self):
        assert not is_valid_semver('v1.13.12')

    def test_parse(self):
        assert parse_semver('1.14.11-beta.1.2+meta') == (1, 14, 11)
        assert parse_semver('1.14') is None

    def test_to_semver_strips_single_v(self):
        assert to_semver('v1.14.11-beta.1.2+c8b135d0b49c44') == '1.14.11-beta.1.2+c8b135d0b49c44'
        assert to_semver('1.13.12') == '1.13.12'

    def test_to_semver_rejects_invalid(self):
        with pytest.raises(InvalidVersionError) as ei:
            to_semver('vv1.13.12')
        assert isinstance(ei.value, ValidationError)
        assert ei.value.status_code == 400
        assert ei.value.details['version'] == 'vv1.13.12'

    def test_to_semver_rejects_release_build_segment(self):
        # the fourth build segment of a kube release is not semver
        with pytest.raises(InvalidVersionError):
            to_semver('v1.17.6.abcde')
