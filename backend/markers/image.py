from __future__ import annotations

import re
import struct
from dataclasses import dataclass

from loguru import logger

from markers.config import marker_max_pixels
from markers.errors import ImageTooLarge, InvalidTint, UnsupportedImageFormat

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class TintSpec:
    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"


@dataclass(frozen=True)
class MarkerImage:
    image: bytes
    size: int
    width: int
    height: int
    tint: TintSpec | None = None


def normalize_marker_url(url: str) -> str:
    u = (url or "").strip()
    if not u.startswith("http"):
        u = "http://" + u
    return u


def expand_tint(tint: str) -> str:
    # 333 -> 333333. Only the bare 3-char form; "#333" is left alone.
    if len(tint) == 3:
        return "".join(c * 2 for c in tint)
    return tint


def parse_tint(tint: str) -> TintSpec:
    m = _HEX_RE.match(expand_tint((tint or "").strip()))
    if m is None:
        raise InvalidTint(f"Invalid marker tint: {tint!r}")
    h = m.group(1)
    return TintSpec(red=int(h[0:2], 16), green=int(h[2:4], 16), blue=int(h[4:6], 16))


def png_dimensions(data: bytes) -> tuple[int, int]:
    if data[:8] != PNG_SIGNATURE or len(data) < 24:
        raise UnsupportedImageFormat("Marker image format is not supported.")
    # IHDR is always the first chunk, so width/height sit at fixed offsets.
    width, height = struct.unpack(">II", data[16:24])
    return width, height


def inspect_marker(
    data: bytes, tint: str | None = None, *, max_pixels: int | None = None
) -> MarkerImage:
    """
    Validate fetched marker bytes: PNG only, at most `max_pixels` in area.

    The tint spec is parsed up front so a bad value fails before any image work.
    """
    parsed = parse_tint(tint) if tint else None
    limit = marker_max_pixels() if max_pixels is None else max_pixels

    try:
        width, height = png_dimensions(data)
    except UnsupportedImageFormat:
        logger.warning(f"marker rejected: not a PNG ({len(data)} bytes)")
        raise

    if width * height > limit:
        logger.warning(f"marker rejected: {width}x{height} exceeds {limit} pixels")
        raise ImageTooLarge(f"Marker image size must not exceed {limit} pixels.")

    return MarkerImage(
        image=data, size=len(data), width=width, height=height, tint=parsed
    )
