"""Constants for the Nature Remo API client.

This module contains the constants used throughout the client,
including the API endpoint, header values and HTTP status codes.
"""

BASE_URL = "https://api.nature.global"
DEFAULT_API_VERSION = 1

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"

# HTTP status codes
HTTP_OK_MIN = 200
HTTP_OK_MAX = 299
HTTP_UNAUTHORIZED = 401
