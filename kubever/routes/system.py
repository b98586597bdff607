import time
from flask import Blueprint, jsonify, current_app

system_bp = Blueprint('system', __name__)

_START_TIME = time.time()


@system_bp.route('/health', methods=['GET'])
def health():
    # lightweight status; no filesystem or network access
    uptime = time.time() - _START_TIME
    return jsonify({'status': 'ok', 'uptime_seconds': round(uptime, 2)})


@system_bp.route('/version', methods=['GET'])
def version():
    uptime = time.time() - _START_TIME
    return jsonify({
        'version': current_app.config.get('KUBEVER_VERSION'),
        'uptime_seconds': round(uptime, 2),
    })
