"""Shared constants for nvhosts."""

from pathlib import Path

# Input / output (overridable via NvhostsConfig / env vars)
DEFAULT_CONFIG_PATH = Path("./nvhosts.yaml")
# Used instead when only this file exists
FALLBACK_CONFIG_PATH = Path("./nvhosts.toml")
OUTPUT_DIR = Path("./sites-available")

# Object-storage backend; the bucket name defaults to the site domain
DEFAULT_BACKEND_URL = "https://storage.googleapis.com"

# NGINX snippets maintained by the operator next to the generated vhosts
SSL_SNIPPET = "snippets/ssl.conf"
PROXY_SNIPPET = "snippets/bucket-proxy.conf"

# Rendering
TEMPLATE_VERSION = 1
DEFAULT_PAD_WIDTH = 35
REDIRECT_DOMAIN_LABELS = 1

# Redirects
DEFAULT_REDIRECT_STATUS_CODE = 302

NGINX_BIN = "nginx"
