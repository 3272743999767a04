"""Genesis ROM dump - Format Sniffing."""
from __future__ import annotations

from enum import Enum

from .protocol import (
    BIN_MARKER,
    BIN_MARKER_OFFSET,
    MIN_SNIFF_LEN,
    SMD_MARKER,
    SMD_MARKER_OFFSET,
)


class RomFormat(Enum):
    UNKNOWN = "unknown"
    SMD = "smd"
    BIN = "bin"


def has_bin_marker(header: bytes) -> bool:
    """True if the linear-image "SEGA" marker sits at 0x100."""
    end = BIN_MARKER_OFFSET + len(BIN_MARKER)
    return bytes(header[BIN_MARKER_OFFSET:end]) == BIN_MARKER


def has_smd_marker(header: bytes) -> bool:
    """True if the copier header carries 0xAA 0xBB at offset 8."""
    end = SMD_MARKER_OFFSET + len(SMD_MARKER)
    return bytes(header[SMD_MARKER_OFFSET:end]) == SMD_MARKER


def sniff_format(header: bytes) -> RomFormat:
    """Classify a header buffer. BIN wins when both markers are present."""
    if len(header) < MIN_SNIFF_LEN:
        return RomFormat.UNKNOWN
    if has_bin_marker(header):
        return RomFormat.BIN
    if has_smd_marker(header):
        return RomFormat.SMD
    return RomFormat.UNKNOWN
