"""
Configuration for pytest tests.
"""

import os
import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

# Must be set before app.config is imported by any test module
os.environ.setdefault("BACKEND_URL", "http://backend.test")
os.environ.setdefault("ENVIRONMENT", "development")


def make_response(status_code: int = 200, json_data=None, json_error: bool = False):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def settings():
    """Settings object handed to the orchestrator."""
    return SimpleNamespace(
        BACKEND_URL="http://backend.test",
        DEFAULT_PROMPT="Summarize this transcript in 200 words.",
        OEMBED_URL_TEMPLATE=(
            "https://www.youtube.com/oembed?format=json"
            "&url=https://www.youtube.com/watch?v={video_id}"
        ),
    )


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"


@pytest.fixture
def oembed_data():
    """oEmbed payload as YouTube returns it."""
    return {
        "title": "Test Video",
        "author_name": "Test Author",
        "author_url": "https://www.youtube.com/@test",
        "thumbnail_url": "https://i.ytimg.com/vi/V3TUEeB0kW0/hqdefault.jpg",
        "html": "<iframe width=\"200\" height=\"113\"></iframe>",
        "type": "video",
    }
