"""Crowdin API constants"""

DEFAULT_BASE_URL = "https://api.crowdin.com/"
USER_AGENT = "crowdin-api-client-python/0.1.0"

FILE_NAME_HEADER = "Crowdin-API-FileName"
DEFAULT_MEDIA_TYPE = "application/octet-stream"
UPLOAD_CHUNK_SIZE = 64 * 1024

