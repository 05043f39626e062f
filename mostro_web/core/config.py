"""
Application configuration and constants
"""

# Directory served over HTTP, relative to the working directory at startup
ASSET_DIR_NAME = "web"

# Loopback only, this server is meant for local development
HOST = "127.0.0.1"
PORT = 3000

PRODUCT_NAME = "Mostro Score Web"

# Served for "/" and for directory paths ending in "/"
INDEX_FILE = "index.html"

# API configuration
API_CONFIG = {
    "title": PRODUCT_NAME,
    "version": "1.0.0",
    "description": "Static file server for Mostro Score Web development",
}

# Extension -> Content-Type. Anything not listed is served as DEFAULT_MEDIA_TYPE
MEDIA_TYPES = {
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".mjs": "application/javascript",
    ".json": "application/json",
    ".map": "application/json",
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".ico": "image/x-icon",
    ".wasm": "application/wasm",
    ".txt": "text/plain",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
}
DEFAULT_MEDIA_TYPE = "application/octet-stream"

# Methods served from the asset root; OPTIONS is handled by the CORS layer
SERVED_METHODS = ["GET", "HEAD"]
