"""Development server for the catalog API.

    pip install -e .
    python run_server.py
"""
import os

from vanquish import create_app

app = create_app()

if __name__ == "__main__":
    host = os.getenv("APP_HOST", "127.0.0.1")
    port = int(os.getenv("APP_PORT", "5000"))
    app.logger.info(f"Starting catalog API on {host}:{port}")
    # single process; the breaker state lives in this app instance
    app.run(host=host, port=port, debug=False, use_reloader=False)
