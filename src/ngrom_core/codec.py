"""Genesis ROM dump - SMD Block Codec."""
from __future__ import annotations

from .protocol import SMD_BLOCK_LEN, SMD_HALF_LEN


def decode_smd_block(smd_block: bytes, out: bytearray | None = None) -> bytearray:
    """Deinterleave one 16 KiB SMD block into natural ROM byte order.

    The first half of an SMD block holds the ROM's odd-addressed bytes and the
    second half its even-addressed bytes. Pass ``out`` to reuse a destination
    buffer; it must be SMD_BLOCK_LEN long and must not alias ``smd_block``.
    """
    if len(smd_block) != SMD_BLOCK_LEN:
        raise ValueError(f"SMD block must be {SMD_BLOCK_LEN} bytes, got {len(smd_block)}")

    if out is None:
        out = bytearray(SMD_BLOCK_LEN)
    elif len(out) != SMD_BLOCK_LEN:
        raise ValueError(f"Output block must be {SMD_BLOCK_LEN} bytes, got {len(out)}")
    elif out is smd_block:
        raise ValueError("Output block must not alias the SMD block")

    src = memoryview(smd_block)
    out[1::2] = src[:SMD_HALF_LEN]
    out[0::2] = src[SMD_HALF_LEN:]
    return out
