"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from hexcodec.config.settings import reset_settings
from hexcodec.core.codec import HexCodec, reset_codec


@pytest.fixture(autouse=True)
def fresh_default_codec(monkeypatch, tmp_path):
    """Fixture rebuilding the default codec from a clean environment."""
    # Settings read .env from the working directory
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HEXCODEC_STRICT", raising=False)
    monkeypatch.delenv("HEXCODEC_CASE_SENSITIVE", raising=False)
    reset_settings()
    reset_codec()
    yield
    reset_settings()
    reset_codec()


@pytest.fixture
def codec():
    """Fixture providing a strict codec."""
    return HexCodec()


@pytest.fixture
def legacy_codec():
    """Fixture providing a codec with legacy (non-validating) decoding."""
    return HexCodec(strict=False)


@pytest.fixture(scope="session")
def test_vectors():
    """Fixture providing known byte/hex pairs."""
    return [
        (b"", ""),
        (bytes([0x00, 0xFF, 0x1A]), "00FF1A"),
        (b"hello", "68656C6C6F"),
        (bytes([0x0A, 0xB0, 0x9F]), "0AB09F"),
    ]


def pytest_configure(config):
    config.addinivalue_line("markers", "benchmark: timing benchmarks")
