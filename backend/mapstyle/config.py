from __future__ import annotations

import os
import tempfile


def marker_base_path() -> str:
    # Where the caller materializes computed pin images before rendering.
    return os.getenv("MAPSTYLE_TMP_PATH") or tempfile.gettempdir()


def xml_escape_enabled() -> bool:
    v = (os.getenv("MAPSTYLE_XML_ESCAPE") or "1").strip().lower()
    return v not in {"0", "false", "no", "off"}
