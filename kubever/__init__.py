import logging
from typing import Optional

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .config import Settings, load_settings
from .logging_utils import configure_logging


def create_app(settings: Optional[Settings] = None):
    # Environment is read here, once; everything below receives the Settings value
    settings = settings or load_settings()
    configure_logging(settings)
    log = logging.getLogger(__name__)

    app = Flask(__name__)
    app.config['KUBEVER_SETTINGS'] = settings
    app.config['KUBEVER_VERSION'] = settings.service_version

    # Rate limiting configuration
    try:
        limiter = Limiter(
            key_func=get_remote_address,
            app=app,
            default_limits=[settings.rate_limit],
            storage_uri=settings.rate_limit_storage,
        )
    except Exception as exc:
        # Storage driver unavailable -> in-memory storage
        log.warning('rate limit storage %s unavailable, using memory err=%s', settings.rate_limit_storage, exc)
        limiter = Limiter(get_remote_address, app=app, default_limits=[settings.rate_limit])
    app.extensions['limiter'] = limiter

    from .routes.release import release_bp
    from .routes.system import system_bp
    app.register_blueprint(release_bp)
    app.register_blueprint(system_bp)

    log.info(
        'kubever %s ready build_root=%s version_base_url=%s',
        settings.service_version, settings.build_root, settings.version_base_url)
    return app
