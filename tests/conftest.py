import struct
import zlib

import pytest
from PIL import Image


@pytest.fixture
def oversized_png(tmp_path):
    """A tiny PNG whose header claims 20000x20000 pixels."""
    path = tmp_path / "huge.png"
    Image.new("L", (2, 2)).save(path)
    data = bytearray(path.read_bytes())
    # IHDR data starts after the 8 byte signature and the 8 byte chunk header
    data[16:24] = struct.pack(">II", 20000, 20000)
    data[29:33] = struct.pack(">I", zlib.crc32(bytes(data[12:29])))
    path.write_bytes(bytes(data))
    return path
