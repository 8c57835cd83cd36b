"""
Tests for the display helpers.
"""

from app.utils.helpers import (
    build_download_filename,
    count_matches,
    highlight_matches,
    sanitize_filename,
    text_stats,
    truncate_text,
)


def test_sanitize_filename():
    assert sanitize_filename('What is "AI"? Part 1/2') == "What_is__AI___Part_1_2"


def test_build_download_filename():
    assert build_download_filename("My Video", "summary") == "My_Video_summary.txt"
    assert build_download_filename(None, "transcript") == "youtube_transcript.txt"


def test_text_stats():
    assert text_stats("one two  three\nfour") == {"words": 4, "characters": 19}
    assert text_stats("") == {"words": 0, "characters": 0}


def test_count_matches():
    text = "Fusion is hot. FUSION is hard. Nuclear fusion."
    assert count_matches(text, "fusion") == 3
    assert count_matches(text, "  ") == 0
    assert count_matches("a.b.c", ".") == 2


def test_highlight_matches():
    """Test that matches keep their original case inside the marker."""
    assert highlight_matches("Fusion and fusion", "fusion") == "**Fusion** and **fusion**"
    assert highlight_matches("unchanged", "") == "unchanged"
    assert highlight_matches("cost is $5", "$5", marker="==") == "cost is ==$5=="


def test_truncate_text():
    assert truncate_text("short", 10) == "short"
    assert truncate_text("a" * 20, 10) == "aaaaaaa..."
