"""Helpers for putting model-generated text into Streamlit markdown."""

import html


def safe_markdown(text: str) -> str:
    """
    Escape text for ``st.markdown``, including calls with ``unsafe_allow_html``.

    HTML special characters become entities so model output cannot inject
    markup, and ``$`` is escaped so Streamlit does not start LaTeX mode.
    """
    return html.escape(text or "").replace("$", "\\$")
