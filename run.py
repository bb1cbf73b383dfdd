# run.py
# Launches the mini-games Flask API.
# The project is installed in editable mode via pyproject.toml, so the
# 'minigames' package is importable without any path manipulation.

import argparse
import logging

from minigames.app import app


def main():
    parser = argparse.ArgumentParser(description="Serve the mini-games puzzle API.")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind (default: 0.0.0.0).")
    parser.add_argument("--port", type=int, default=5001, help="Port to listen on (default: 5001).")
    parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode with auto-reload.")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: INFO).")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == '__main__':
    main()
