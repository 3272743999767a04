import random
from pathlib import Path

import pytest

HEADER_LEN = 512
BLOCK = 16384
HALF = BLOCK // 2

# Cartridge header used by the synthetic images: (offset, bytes)
CART_HEADER = [
    (0x100, b"SEGA MEGA DRIVE "),
    (0x110, b"(C)SEGA 1991.APR"),
    (0x120, b"SONIC THE               HEDGEHOG                "),
    (0x150, b"SONIC THE               HEDGEHOG                "),
    (0x180, b"GM 00001009-00"),
    (0x18E, b"\x26\x4a"),
    (0x190, b"J               "),
    (0x1A0, b"\x00\x00\x00\x00\x00\x07\xff\xff"),
    (0x1BC, b"\x20" * 12),
    (0x1C8, b" " * 40),
    (0x1F0, b"JUE"),
]


def interleave(bin_block) -> bytes:
    """Test-only inverse of the SMD decode: odd bytes first, then even bytes."""
    assert len(bin_block) == BLOCK
    return bytes(bin_block[1::2]) + bytes(bin_block[0::2])


def build_bin_image(num_blocks: int = 1, seed: int = 0, header=CART_HEADER) -> bytearray:
    rng = random.Random(seed)
    image = bytearray(rng.getrandbits(8) for _ in range(num_blocks * BLOCK))
    for off, raw in header:
        image[off:off + len(raw)] = raw
    return image


def build_smd_image(bin_image) -> bytes:
    assert len(bin_image) % BLOCK == 0
    num_blocks = len(bin_image) // BLOCK
    copier = bytearray(HEADER_LEN)
    copier[0] = num_blocks & 0xFF
    copier[1] = 0x03
    copier[8] = 0xAA
    copier[9] = 0xBB
    copier[10] = 0x06
    blocks = [interleave(bin_image[i * BLOCK:(i + 1) * BLOCK]) for i in range(num_blocks)]
    return bytes(copier) + b"".join(blocks)


@pytest.fixture
def in_dir(tmp_path) -> Path:
    d = tmp_path / "in"
    d.mkdir()
    return d


@pytest.fixture
def out_dir(tmp_path) -> Path:
    d = tmp_path / "out"
    d.mkdir()
    return d


@pytest.fixture
def smd_rom(in_dir):
    """Factory: write an SMD dump, return (path, expected BIN image)."""
    def _make(name: str = "game.smd", num_blocks: int = 1, seed: int = 0):
        image = build_bin_image(num_blocks, seed)
        p = in_dir / name
        p.write_bytes(build_smd_image(image))
        return p, bytes(image)
    return _make


@pytest.fixture
def bin_rom(in_dir):
    def _make(name: str = "game.bin", num_blocks: int = 1, seed: int = 0):
        image = build_bin_image(num_blocks, seed)
        p = in_dir / name
        p.write_bytes(bytes(image))
        return p, bytes(image)
    return _make
