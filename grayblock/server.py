"""Flask application exposing the pixelation pipeline over HTTP.

Usage:
    python -m grayblock.server --port 8080
    curl -F image=@photo.jpg http://127.0.0.1:8080/pixelate -o out.png
"""
from __future__ import annotations

import argparse
import io
import logging
from typing import Optional

from flask import Flask, jsonify, request, send_file
from flask_cors import CORS

from .config import DEFAULT_CORS_ORIGINS, ServerConfig
from .errors import GrayblockError
from .pipeline import BLOCK_SIZE, pixelate_bytes


def create_app(config: Optional[ServerConfig] = None) -> Flask:
    """Build the Flask app serving ``POST /pixelate``."""
    config = config or ServerConfig()

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.max_content_length
    app.config["GRAYBLOCK"] = config
    CORS(app, origins=list(config.cors_origins))

    @app.errorhandler(GrayblockError)
    def handle_pipeline_error(exc: GrayblockError):
        app.logger.warning("rejected upload: %s: %s", type(exc).__name__, exc)
        return jsonify(error=str(exc)), 400

    @app.route("/pixelate", methods=["POST"])
    def pixelate_route():
        file = request.files.get("image")
        if file is None:
            return jsonify(error="missing form field 'image'"), 400

        data = file.read()
        if not data:
            return jsonify(error="uploaded image is empty"), 400

        png = pixelate_bytes(data, block_size=config.block_size, threshold=config.threshold)
        app.logger.info("pixelated %s (%d -> %d bytes)", file.filename or "<upload>", len(data), len(png))
        return send_file(io.BytesIO(png), mimetype="image/png")

    return app


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="grayblock-server",
        description="Serve the pixelate-and-grayscale transform over HTTP",
    )
    p.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    p.add_argument("--port", type=int, default=8080, help="Port to listen on")
    p.add_argument("--block", type=int, default=BLOCK_SIZE, help="Pixelation block size (>=1)")
    p.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Map output to black/white at this luma level (0-255); off by default",
    )
    p.add_argument(
        "--cors-origin",
        action="append",
        dest="cors_origins",
        default=None,
        help="Allowed CORS origin; repeat for several (default: http://localhost:5173)",
    )
    p.add_argument("--max-upload-mb", type=int, default=16, help="Reject uploads larger than this")
    p.add_argument("--debug", action="store_true", help="Enable Flask debug mode and debug logging")
    return p.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = ServerConfig(
            block_size=args.block,
            threshold=args.threshold,
            cors_origins=tuple(args.cors_origins or DEFAULT_CORS_ORIGINS),
            max_content_length=args.max_upload_mb * 1024 * 1024,
            host=args.host,
            port=args.port,
        )
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2

    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=args.debug)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
