import os
from kubever import create_app

app = create_app()

if __name__ == '__main__':
    # Debug/reloader off by default. Enable by setting KUBEVER_DEBUG_SERVER=1
    debug_flag = os.environ.get('KUBEVER_DEBUG_SERVER', '0') == '1'
    port = int(os.environ.get('KUBEVER_PORT', '5000'))
    try:
        routes = sorted({r.rule for r in app.url_map.iter_rules()})
        print(f"[kubever] Route count={len(routes)} routes={routes}")
    except Exception as e:
        print(f"[kubever] Failed listing routes: {e}")
    app.run(host='0.0.0.0', port=port, debug=debug_flag, use_reloader=debug_flag)
