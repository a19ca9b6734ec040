from __future__ import annotations

import os

DEFAULT_MAX_PIXELS = 160_000  # 400x400


def marker_max_pixels() -> int:
    raw = (os.getenv("MARKER_MAX_PIXELS") or "").strip()
    if not raw:
        return DEFAULT_MAX_PIXELS
    try:
        return max(1, int(raw))
    except ValueError:
        return DEFAULT_MAX_PIXELS
