"""
Main Streamlit application for YouTube Summary AI.
"""

import streamlit as st
from typing import Dict, Any, Optional
from dotenv import load_dotenv

from app.config import config
from app.frontend.api_client import ApiClient, ApiError
from app.frontend.components import (
    header, sidebar, summary_form, display_metadata, display_result,
    loading_spinner, display_error, display_success,
)


load_dotenv()


def init_session_state(api_url: str):
    """Initialize session state variables."""
    client = st.session_state.get("api_client")
    if client is None or client.base_url != api_url:
        st.session_state.api_client = ApiClient(api_url)

    if "result" not in st.session_state:
        st.session_state.result = None

    if "error" not in st.session_state:
        st.session_state.error = ""


def process_youtube_url(url: str, prompt: Optional[str]) -> Dict[str, Any]:
    """
    Request a summary for a YouTube URL.

    Args:
        url: YouTube URL
        prompt: Instruction for the backend

    Returns:
        Successful response or {"error": message}
    """
    client = st.session_state.api_client

    try:
        with loading_spinner("Generating summary..."):
            return client.summarize_video(url, prompt)
    except ApiError as e:
        return {"error": e.message}
    except Exception as e:
        return {"error": f"An error occurred while processing your request: {str(e)}"}


def main():
    header()
    api_url = sidebar() or config.PUBLIC_URL
    init_session_state(api_url)

    url, prompt = summary_form()

    if url is not None:
        st.session_state.result = None
        st.session_state.error = ""

        if not url.strip():
            st.session_state.error = "Please enter a YouTube URL"
        else:
            result = process_youtube_url(url, prompt)
            if "error" in result:
                st.session_state.error = result["error"]
            else:
                st.session_state.result = result

    if st.session_state.error:
        display_error(st.session_state.error)

    if st.session_state.result:
        display_success("Summary ready!")
        display_metadata(st.session_state.result.get("metadata"))
        display_result(st.session_state.result)


if __name__ == "__main__":
    main()
