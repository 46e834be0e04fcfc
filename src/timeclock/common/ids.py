from __future__ import annotations

import time
import uuid


def generate_id() -> str:
    """Opaque id shaped ``<epoch-ms>_<9 hex chars>``; sorts roughly by creation."""
    return f"{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"
