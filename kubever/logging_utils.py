import logging
import os
from logging.handlers import RotatingFileHandler

from .config import Settings

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def configure_logging(settings: Settings) -> int:
    """Configure root logging from ``settings``.

    Parameters
    ----------
    settings: Settings
        Loaded process settings; ``log_level`` picks the level and
        ``log_file`` optionally attaches a rotating file handler.

    Returns
    -------
    int
        The numeric level that was applied. Unknown level names fall back to
        ``INFO``.
    """
    level = getattr(logging, settings.log_level, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    log = logging.getLogger('kubever')
    if settings.log_file:
        root = logging.getLogger()
        already = any(
            isinstance(h, RotatingFileHandler) and getattr(h, 'baseFilename', None) == os.path.abspath(settings.log_file)
            for h in root.handlers
        )
        if not already:
            try:
                fh = RotatingFileHandler(
                    settings.log_file,
                    maxBytes=settings.log_max_bytes,
                    backupCount=settings.log_backup_count,
                )
            except OSError as exc:
                log.warning('failed attaching RotatingFileHandler for %s err=%s', settings.log_file, exc)
            else:
                fh.setLevel(level)
                fh.setFormatter(logging.Formatter(LOG_FORMAT))
                root.addHandler(fh)
                log.info(
                    'RotatingFileHandler attached path=%s max_bytes=%d backups=%d',
                    settings.log_file, settings.log_max_bytes, settings.log_backup_count)
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    log.info('Logging initialized at level %s', logging.getLevelName(level))
    return level
