"""Pytest fixtures for hexfmt tests."""

import pytest


@pytest.fixture
def nine_to_f():
    """Seven bytes 0x09..0x0f."""
    return bytes([9, 10, 11, 12, 13, 14, 15])


@pytest.fixture
def sample_file(nine_to_f, tmp_path):
    """Create a temporary binary file holding nine_to_f."""
    path = tmp_path / "sample.bin"
    path.write_bytes(nine_to_f)
    return path
