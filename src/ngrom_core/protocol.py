"""Genesis ROM dump protocol constants.

Single source of truth for on-disk marker values and block layouts.
Keep this file stable. Sniffer, Validator and Converter must remain synchronized.
"""

# SMD copier header, stripped on conversion
HEADER_LEN = 512

# SMD payload is a sequence of fixed interleaved blocks.
# Block: [odd bytes(8192) | even bytes(8192)] = 16384 bytes
SMD_BLOCK_LEN = 16384  # 16 KiB
SMD_HALF_LEN = SMD_BLOCK_LEN // 2

# Smallest convertible file: header plus one full block
MIN_SMD_FILE_LEN = HEADER_LEN + SMD_BLOCK_LEN

# Format markers
BIN_MARKER = b"SEGA"
BIN_MARKER_OFFSET = 0x100
SMD_MARKER = b"\xaa\xbb"
SMD_MARKER_OFFSET = 8

# Sniffing needs everything up to the end of the BIN marker.
MIN_SNIFF_LEN = BIN_MARKER_OFFSET + len(BIN_MARKER)
