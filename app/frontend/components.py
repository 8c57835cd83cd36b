"""
Reusable UI components for the Streamlit app.
"""

import os
import streamlit as st
from typing import Dict, Any, Optional, Tuple

from app.config import config
from app.core.resolver import is_youtube_url
from app.utils.helpers import (
    build_download_filename,
    count_matches,
    highlight_matches,
    text_stats,
    truncate_text,
)


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="YouTube Summary AI",
        page_icon="🎬",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("🎬 YouTube Summary AI")
    st.markdown("""
    Get AI-powered summaries of YouTube videos instantly.
    """)
    st.divider()


def sidebar() -> str:
    """
    Display the sidebar with app information and options.

    Returns:
        The API URL entered by the user
    """
    with st.sidebar:
        st.title("YouTube Summary AI")

        st.markdown("## About")
        st.info("""
        Paste a YouTube link and an instruction. The video is transcribed and
        summarized by the processing backend; title and thumbnail come from
        YouTube directly.
        """)

        st.markdown("## Settings")
        return st.text_input("API URL", value=os.getenv("API_URL", config.PUBLIC_URL), key="api_url")


def summary_form() -> Tuple[Optional[str], Optional[str]]:
    """
    Display the URL and prompt inputs.

    Returns:
        (url, prompt) when submitted, otherwise (None, None)
    """
    with st.form(key="summary_form"):
        url = st.text_input(
            "YouTube URL",
            placeholder="https://www.youtube.com/watch?v=...",
        )
        if url and not is_youtube_url(url.strip()):
            st.caption(":red[Please enter a valid YouTube URL]")

        prompt = st.text_area(
            "Summary Prompt",
            value=config.DEFAULT_PROMPT,
            height=90,
        )
        st.caption('You can specify time ranges like "Summarize from 1:00 to 3:00" or custom instructions')

        submit = st.form_submit_button("Generate Summary")

    if submit:
        return url, prompt

    return None, None


def display_metadata(metadata: Optional[Dict[str, Any]]):
    """
    Display the video card. Nothing is shown when metadata is missing.

    Args:
        metadata: oEmbed metadata or None
    """
    if not metadata:
        return

    col1, col2 = st.columns([1, 2])
    with col1:
        if metadata.get("thumbnail_url"):
            st.image(metadata["thumbnail_url"], caption=truncate_text(metadata.get("title") or "", 60))
    with col2:
        st.markdown(f"### {metadata.get('title', 'Untitled')}")
        if metadata.get("author_name"):
            st.markdown(f"**Channel:** {metadata['author_name']}")


def display_result(result: Dict[str, Any]):
    """
    Display the summary or transcript with search, counts and download.

    Args:
        result: Successful response from the API
    """
    if result.get("transcript") is not None:
        kind, text = "transcript", result["transcript"]
    else:
        kind, text = "summary", result.get("summary") or ""

    st.markdown(f"### {kind.capitalize()}")

    query = st.text_input(f"Search in {kind}", key=f"search_{kind}")
    if query.strip():
        matches = count_matches(text, query)
        st.caption(f"{matches} match{'es' if matches != 1 else ''} found")
        st.markdown(highlight_matches(text, query))
    else:
        st.markdown(text)

    stats = text_stats(text)
    st.caption(f"{stats['words']} words · {stats['characters']} characters")

    title = (result.get("metadata") or {}).get("title")
    st.download_button(
        f"Download {kind}",
        data=text,
        file_name=build_download_filename(title, kind),
        mime="text/plain",
    )
    with st.expander("Copy"):
        st.code(text, language=None)


def loading_spinner(message: str = "Processing..."):
    """
    Display a loading spinner with a message.

    Args:
        message: Message to display with the spinner
    """
    return st.spinner(message)


def display_error(message: str):
    st.error(message)


def display_success(message: str):
    st.success(message)
