"""
Tests for the oEmbed metadata lookup.
"""

import pytest
import requests
from unittest.mock import patch

from app.core.metadata import MetadataFetcher
from tests.conftest import make_response


@pytest.fixture
def mock_get():
    """Fixture to mock outbound GET requests."""
    with patch('app.core.metadata.requests.get') as mock_get:
        yield mock_get


@pytest.fixture
def fetcher(settings):
    return MetadataFetcher(settings.OEMBED_URL_TEMPLATE)


def test_fetch_metadata(mock_get, fetcher, oembed_data):
    """Test a successful lookup."""
    mock_get.return_value = make_response(200, oembed_data)

    metadata = fetcher.fetch("https://youtu.be/V3TUEeB0kW0")

    assert metadata["title"] == "Test Video"
    assert metadata["author_name"] == "Test Author"
    assert metadata["thumbnail_url"] == oembed_data["thumbnail_url"]
    assert metadata["html"] == oembed_data["html"]
    mock_get.assert_called_once_with(
        "https://www.youtube.com/oembed?format=json"
        "&url=https://www.youtube.com/watch?v=V3TUEeB0kW0"
    )


def test_metadata_kept_verbatim(mock_get, fetcher, oembed_data):
    """Fields beyond the named four survive unchanged."""
    mock_get.return_value = make_response(200, oembed_data)

    metadata = fetcher.fetch("https://www.youtube.com/watch?v=V3TUEeB0kW0")

    assert metadata == oembed_data


@pytest.mark.parametrize("url", ["not a url", "", "https://vimeo.com/1"])
def test_unresolvable_url_skips_network(mock_get, fetcher, url):
    """Test that no request is made when no video ID can be found."""
    assert fetcher.fetch(url) is None
    mock_get.assert_not_called()


@pytest.mark.parametrize("status_code", [401, 404, 500])
def test_non_success_status(mock_get, fetcher, status_code):
    mock_get.return_value = make_response(status_code, {"error": "nope"})

    assert fetcher.fetch("https://youtu.be/V3TUEeB0kW0") is None


def test_transport_error(mock_get, fetcher):
    """Test that connection failures are absorbed."""
    mock_get.side_effect = requests.ConnectionError("unreachable")

    assert fetcher.fetch("https://youtu.be/V3TUEeB0kW0") is None


def test_malformed_json(mock_get, fetcher):
    mock_get.return_value = make_response(200, json_error=True)

    assert fetcher.fetch("https://youtu.be/V3TUEeB0kW0") is None


def test_non_object_json(mock_get, fetcher):
    mock_get.return_value = make_response(200, ["not", "an", "object"])

    assert fetcher.fetch("https://youtu.be/V3TUEeB0kW0") is None


def test_unexpected_field_types(mock_get, fetcher):
    """Test that a body that does not look like oEmbed metadata is dropped."""
    mock_get.return_value = make_response(200, {"title": ["not", "a", "string"]})

    assert fetcher.fetch("https://youtu.be/V3TUEeB0kW0") is None


@pytest.mark.parametrize("status_code", [300, 302, 304])
def test_redirect_status_is_not_success(mock_get, fetcher, oembed_data, status_code):
    """Test that an unfollowed redirect is treated as a failed lookup."""
    mock_get.return_value = make_response(status_code, oembed_data)

    assert fetcher.fetch("https://youtu.be/V3TUEeB0kW0") is None
