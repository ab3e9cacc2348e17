import os
from typing import List

# Content layout
CONTENT_ROOT = os.getenv("CONTENT_ROOT", "./src/content")
CONTENT_PATTERN = os.getenv("CONTENT_PATTERN", "**/*.mdx")

# HTTP adapter
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
