import logging
import signal
import sys

from flask import Blueprint, Flask, Response, json
from werkzeug.exceptions import HTTPException

from docket_config import LOG_FORMAT, ConfigurationError, Settings

GREETING = "Hello from Docker spring boot app"
HOST = "0.0.0.0"
PORT = 8080

api = Blueprint("api", __name__, url_prefix="/api")


@api.route("/hello", methods=["GET"])
def hello():
    """Returns the fixed greeting as plain text."""
    return Response(GREETING, status=200, mimetype="text/plain")


def create_app():
    app = Flask(__name__)
    app.register_blueprint(api)

    # --- Error responses ---
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if e.code == 500:
            app.logger.error(f"Unhandled error: {getattr(e, 'original_exception', e)}")
        # keeps headers such as Allow on 405
        response = e.get_response()
        response.data = json.dumps({"error": e.name.lower()})
        response.content_type = "application/json"
        return response

    return app


app = create_app()


def _handle_shutdown(signum, frame):
    app.logger.info(f"Received {signal.Signals(signum).name}, shutting down")
    sys.exit(0)


def main():
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logging.getLogger(__name__).error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)
    signal.signal(signal.SIGTERM, _handle_shutdown)
    signal.signal(signal.SIGINT, _handle_shutdown)

    app.logger.info(f"Starting server on {HOST}:{PORT}")
    try:
        app.run(host=HOST, port=PORT)
    except SystemExit as e:
        # werkzeug reports bind failures on stderr and exits 1
        if e.code:
            app.logger.error(f"Could not bind {HOST}:{PORT}, exit status {e.code}")
        raise


if __name__ == "__main__":
    main()
