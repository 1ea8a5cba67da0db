import os

# =======================================================
# 1. Response texts (not configurable)
# =======================================================
GREETING_MESSAGE = "CI/CD + Terraform demo working 🚀"
DEPLOY_MESSAGE = "deployed by CI/CD + Terraform demo working 🚀"


# =======================================================
# 2. Server settings from environment variables
# =======================================================
def parse_port(value):
    """Turn the PORT env value into a usable TCP port."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"PORT must be an integer, got {value!r}")
    if not 1 <= port <= 65535:
        raise ValueError(f"PORT must be between 1 and 65535, got {port}")
    return port


def parse_origins(value):
    """Split the CORS_ORIGINS env value into a list of origins."""
    origins = [o.strip() for o in value.split(",") if o.strip()]
    if not origins:
        raise ValueError(f"CORS_ORIGINS must name at least one origin or '*', got {value!r}")
    return origins


HOST = os.environ.get("HOST", "0.0.0.0")
PORT = parse_port(os.environ.get("PORT", "3000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"

# Comma separated, e.g. "http://my-site.s3-website-ap-northeast-2.amazonaws.com"
CORS_ORIGINS = parse_origins(os.environ.get("CORS_ORIGINS", "*"))
