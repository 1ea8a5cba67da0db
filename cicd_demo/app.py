import logging

from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from cicd_demo.config import (
    CORS_ORIGINS,
    DEBUG,
    DEPLOY_MESSAGE,
    GREETING_MESSAGE,
    HOST,
    LOG_LEVEL,
    PORT,
)

# =======================================================
# 1. Flask app setup
# =======================================================
# Gunicorn and the Dockerfile refer to this object as 'cicd_demo.app:app'.
app = Flask(__name__)
CORS(app, resources={r"/*": {"origins": CORS_ORIGINS}})

# Under Gunicorn, reuse its logger so app.logger output ends up in the
# container logs (CloudWatch / kubectl logs).
if __name__ != '__main__':
    gunicorn_logger = logging.getLogger('gunicorn.error')
    if gunicorn_logger.handlers:
        app.logger.handlers = gunicorn_logger.handlers
        app.logger.setLevel(gunicorn_logger.level)


# =======================================================
# 2. Routes
# =======================================================
@app.route('/', methods=['GET'])
def home():
    """Greeting, also what the ALB health check hits."""
    app.logger.info("GET / served")
    return GREETING_MESSAGE


@app.route('/deploy', methods=['GET'])
def deploy():
    app.logger.info("GET /deploy served")
    return DEPLOY_MESSAGE


# =======================================================
# 3. Error handling
# =======================================================
@app.errorhandler(Exception)
def handle_unexpected_error(e):
    # 404 / 405 and friends keep the Werkzeug default response
    if isinstance(e, HTTPException):
        return e
    app.logger.error(f"Unhandled error: {e}", exc_info=True)
    return "Internal Server Error", 500


# =======================================================
# 4. Local run (Gunicorn does not use this)
# =======================================================
def run_server(host=HOST, port=PORT):
    logging.basicConfig(level=LOG_LEVEL)
    app.logger.setLevel(LOG_LEVEL)
    app.logger.info(f"App running on {host}:{port}")
    app.run(host=host, port=port, debug=DEBUG)


if __name__ == '__main__':
    run_server()
