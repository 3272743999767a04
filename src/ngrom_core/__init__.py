"""ngrom core - Shared ROM format constants, sniffing and block decoding."""
from .codec import decode_smd_block
from .formats import RomFormat, has_bin_marker, has_smd_marker, sniff_format
from .policy import ACTION_CHOICES, FileCheckAction, StopRequested, apply_action

__version__ = "0.1.0"

__all__ = [
    "decode_smd_block",
    "RomFormat",
    "has_bin_marker",
    "has_smd_marker",
    "sniff_format",
    "ACTION_CHOICES",
    "FileCheckAction",
    "StopRequested",
    "apply_action",
]
