from flask import Blueprint, request, jsonify, current_app
import logging

from ..config import Settings
from ..exceptions import InvalidArgumentError, InvalidVersionError, KubeverException, error_response
from ..repo import get_tool_branch, get_tool_repo_url
from ..versioning import (
    RemoteVersionResolver,
    is_dirty_build,
    is_valid_release_build,
    read_build_version,
    to_semver,
    version_marker_url,
)

release_bp = Blueprint('release', __name__, url_prefix='/api/release')

_TRUTHY = ('1', 'true', 'yes', 'on')


def _settings() -> Settings:
    return current_app.config['KUBEVER_SETTINGS']


@release_bp.errorhandler(KubeverException)
def _handle_kubever_error(exc: KubeverException):
    level = logging.WARNING if exc.status_code >= 500 else logging.INFO
    logging.getLogger('kubever.api').log(level, 'release api error code=%s msg=%s', exc.error_code, exc.message)
    body, status = error_response(exc)
    return jsonify(body), status


@release_bp.route('/validate', methods=['GET'])
def validate():
    """Validate a version string.
    Params: version (required)
    Response: {version, valid_release_build, dirty, semver}
    """
    version = (request.args.get('version') or '').strip()
    if not version:
        raise InvalidArgumentError('version')
    try:
        semver = to_semver(version)
    except InvalidVersionError:
        semver = None
    return jsonify({
        'version': version,
        'valid_release_build': is_valid_release_build(version),
        'dirty': is_dirty_build(version),
        'semver': semver,
    })


@release_bp.route('/build', methods=['GET'])
def build():
    """Provenance and declared version of the configured build root."""
    root = _settings().build_root
    payload = read_build_version(root).to_dict()
    payload['build_root'] = root
    return jsonify(payload)


@release_bp.route('/remote', methods=['GET'])
def remote():
    """Resolve a published version marker.
    Params: kind (stable|latest, default stable), minor (e.g. 1.14), ci, semver
    Only markers under the configured base URL can be resolved.
    """
    settings = _settings()
    kind = request.args.get('kind', 'stable')
    minor = (request.args.get('minor') or '').strip() or None
    ci = request.args.get('ci', '0').lower() in _TRUTHY
    use_semver = request.args.get('semver', '0').lower() in _TRUTHY
    url = version_marker_url(kind, minor, ci=ci, base_url=settings.version_base_url)
    version = RemoteVersionResolver(timeout=settings.fetch_timeout).resolve(url, use_semver)
    return jsonify({'url': url, 'version': version, 'semver': use_semver})


@release_bp.route('/tool', methods=['GET'])
def tool():
    settings = _settings()
    return jsonify({
        'repo_url': get_tool_repo_url(settings=settings),
        'repo_url_ssh': get_tool_repo_url(use_ssh=True, settings=settings),
        'branch': get_tool_branch(settings),
    })
