# app/config.py
import os

# MCP widget resource
MIME_TYPE = "text/html+skybridge"

# Public HTTPS address of the service
BASE_URL = os.getenv("BASE_URL", "http://localhost:8000")

# Card images are requested as IMAGE_BASE_URL + title
IMAGE_BASE_URL = os.getenv("IMAGE_BASE_URL", "https://source.unsplash.com/500x300/?")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CURRENCY = "SR"
DEFAULT_PRICE = 8

# Origins allowed to call the API; the widget runs inside MCP host sandboxes
ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()
]
