"""Tests for the tool cache."""

from pathlib import Path
from unittest.mock import MagicMock, Mock

import pytest
import requests

from droidship.cache.tool_cache import ToolCache, create_tool_cache
from droidship.core.errors import CacheError
from droidship.protocols import ToolCacheProtocol


def make_session(chunks: list[bytes] | None = None, error: Exception | None = None) -> Mock:
    """Build a requests session whose get() streams ``chunks``."""
    response = MagicMock()
    response.__enter__.return_value = response
    response.iter_content.return_value = chunks or []
    if error is not None:
        response.raise_for_status.side_effect = error

    session = Mock(spec=requests.Session)
    session.get.return_value = response
    return session


class TestToolCache:
    """Test bundletool download."""

    def test_create_tool_cache(self, user_config_data):
        cache = create_tool_cache(user_config_data)
        assert isinstance(cache, ToolCacheProtocol)

    def test_downloads_missing_bundletool(self, user_config_data):
        session = make_session([b"PK", b"\x03\x04jar"])
        cache = ToolCache(user_config_data, session=session)

        cache.update_all()

        jar = user_config_data.bundletool_jar
        assert jar.read_bytes() == b"PK\x03\x04jar"
        url = user_config_data.bundletool_url.format(
            version=user_config_data.bundletool_version
        )
        session.get.assert_called_once_with(
            url, stream=True, timeout=user_config_data.download_timeout
        )
        assert list(jar.parent.glob("*.part")) == []

    def test_update_all_is_idempotent(self, user_config_data):
        jar = user_config_data.bundletool_jar
        jar.parent.mkdir(parents=True)
        jar.write_bytes(b"cached")
        session = make_session()
        cache = ToolCache(user_config_data, session=session)

        cache.update_all()
        cache.update_all()

        session.get.assert_not_called()
        assert jar.read_bytes() == b"cached"

    def test_http_error(self, user_config_data):
        session = make_session(error=requests.exceptions.HTTPError("404 Not Found"))
        cache = ToolCache(user_config_data, session=session)

        with pytest.raises(CacheError, match="Failed to download"):
            cache.update_all()

        jar = user_config_data.bundletool_jar
        assert not jar.exists()
        assert list(jar.parent.glob("*.part")) == []

    def test_connection_error(self, user_config_data):
        session = Mock(spec=requests.Session)
        session.get.side_effect = requests.exceptions.ConnectionError("offline")
        cache = ToolCache(user_config_data, session=session)

        with pytest.raises(CacheError) as exc_info:
            cache.update_all()

        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)

    def test_interrupted_download_leaves_no_partial_file(self, user_config_data):
        response = MagicMock()
        response.__enter__.return_value = response

        def broken_stream(chunk_size):
            yield b"partial"
            raise requests.exceptions.ChunkedEncodingError("connection reset")

        response.iter_content.side_effect = broken_stream
        session = Mock(spec=requests.Session)
        session.get.return_value = response
        cache = ToolCache(user_config_data, session=session)

        with pytest.raises(CacheError):
            cache.update_all()

        jar: Path = user_config_data.bundletool_jar
        assert not jar.exists()
        assert list(jar.parent.glob("*.part")) == []
