import pytest

from dupscan.config.settings import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(max_file_size_bytes=5 * 1024 * 1024, batch_size=50)


@pytest.fixture()
def half_null_bytes() -> bytes:
    """Content where every other byte is NUL."""
    return b"\x00a" * 64
