from __future__ import annotations

import os

LOG_LEVEL = os.getenv("RENAMER_LOG_LEVEL", "WARNING").upper()
DEFAULT_TEMPLATE = os.getenv("RENAMER_DEFAULT_TEMPLATE", "name_{index}")
NAMES_ENCODING = os.getenv("RENAMER_NAMES_ENCODING", "utf-8-sig")
