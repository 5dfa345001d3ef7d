"""Streamlit dashboard for YouTube video transcripts and AI analysis."""

import streamlit as st

from videosense.config import Config, configure_logging
from videosense.display import safe_markdown
from videosense.errors import AnalysisFailed
from videosense.pipeline import analyze_video
from videosense.store import create_store
from videosense.writers.analysis_writer import render_analysis, sentiment_label
from videosense.writers.json_writer import render_json
from videosense.writers.srt_writer import render_srt
from videosense.writers.txt_writer import format_clock, render_txt
from videosense.youtube import is_youtube_url


# Page configuration
st.set_page_config(
    page_title="Video Sense AI",
    page_icon="🎥",
    layout="wide",
    initial_sidebar_state="expanded"
)


# Load secrets from Streamlit Cloud and update Config
# This happens AFTER page config when st.secrets is safe to access
def load_streamlit_secrets():
    """Load secrets from Streamlit Cloud into Config."""
    try:
        if not st.secrets:
            return
        for key in ('OPENAI_API_KEY', 'OPENAI_BASE_URL', 'ANALYSIS_MODEL', 'OEMBED_ENDPOINT', 'STORE_DIR'):
            if key in st.secrets:
                setattr(Config, key, str(st.secrets[key]))
    except (AttributeError, TypeError, KeyError, FileNotFoundError):
        # No secrets file - keep the .env / environment values
        pass


load_streamlit_secrets()
configure_logging()

# Custom CSS for better styling
st.markdown("""
    <style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        text-align: center;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        text-align: center;
        color: #555555;
        margin-bottom: 2rem;
    }
    .stButton>button {
        width: 100%;
    }
    .timestamp-pill {
        display: inline-block;
        font-family: monospace;
        font-size: 0.85em;
        background-color: #eef2ff;
        color: #3730a3;
        border-radius: 999px;
        padding: 0.1rem 0.6rem;
        margin-right: 0.5rem;
    }
    .speaker-label {
        font-weight: 600;
        font-size: 0.9em;
        color: #4338ca;
    }
    .question-card {
        background-color: #f5f5f5;
        border-radius: 8px;
        padding: 0.75rem;
        margin-bottom: 0.5rem;
        font-weight: 500;
    }
    </style>
""", unsafe_allow_html=True)

# Initialize session state
if 'store' not in st.session_state:
    st.session_state.store = create_store()
if 'record' not in st.session_state:
    st.session_state.record = None
if 'error' not in st.session_state:
    st.session_state.error = None
if 'history' not in st.session_state:
    st.session_state.history = []  # List of (url, title)


def run_analysis(url: str) -> None:
    """Analyse a URL and put the result (or error message) in session state."""
    st.session_state.error = None
    try:
        with st.spinner("Analyzing the video with AI. This may take a moment..."):
            record = analyze_video(url, store=st.session_state.store)
    except AnalysisFailed as e:
        st.session_state.record = None
        st.session_state.error = str(e)
        return

    st.session_state.record = record
    if not any(h[0] == url for h in st.session_state.history):
        st.session_state.history.insert(0, (url, record.video_info.title))


def render_video_info(info):
    """Video card: thumbnail, title, creator and stats."""
    with st.container(border=True):
        st.image(info.thumbnail_url, use_container_width=True)
        st.subheader(safe_markdown(info.title))
        st.caption(safe_markdown(info.creator))
        col1, col2, col3 = st.columns(3)
        col1.caption(f"⏱️ {info.duration}")
        col2.caption(f"📅 {info.published_date}")
        col3.caption(f"👁️ {info.view_count}")


def render_analysis_panel(analysis):
    """Tabs for summary, key points, topics and questions."""
    with st.container(border=True):
        st.markdown("### 🧠 AI Analysis")
        summary_tab, points_tab, topics_tab, questions_tab = st.tabs(
            ["💡 Summary", "✅ Key Points", "#️⃣ Topics", "❓ Questions"]
        )

        with summary_tab:
            st.markdown(safe_markdown(analysis.summary))
            st.caption(f"📊 Sentiment: **{sentiment_label(analysis.sentiment_score)}**")
            st.progress(analysis.sentiment_score)

        with points_tab:
            for point in analysis.key_points:
                st.markdown(f"- {safe_markdown(point)}")

        with topics_tab:
            for topic in analysis.topics:
                st.markdown(f"**{safe_markdown(topic.name)}** · {round(topic.relevance * 100)}%")
                st.progress(topic.relevance)

        with questions_tab:
            for question in analysis.questions:
                st.markdown(f'<div class="question-card">{safe_markdown(question)}</div>', unsafe_allow_html=True)


def render_transcript_panel(record):
    """Tabs for the full transcript and its chapters."""
    with st.container(border=True):
        st.markdown("### 📝 Transcript")
        tab_names = ["Full Transcript"]
        if record.chapters:
            tab_names.append("Chapters")
        tabs = st.tabs(tab_names)

        with tabs[0]:
            with st.container(height=500):
                for segment in record.transcript:
                    speaker = f'<span class="speaker-label">{safe_markdown(segment.speaker)}</span><br>' if segment.speaker else ""
                    st.markdown(
                        f'<span class="timestamp-pill">{format_clock(segment.start_time)}</span>'
                        f'{speaker}{safe_markdown(segment.text)}',
                        unsafe_allow_html=True
                    )

        if record.chapters:
            with tabs[1]:
                with st.container(height=500):
                    for chapter in record.chapters:
                        st.markdown(
                            f"**{safe_markdown(chapter.title)}** "
                            f"🕒 {format_clock(chapter.start_time)} - {format_clock(chapter.end_time)}"
                        )
                        for segment in chapter.segments:
                            st.markdown(safe_markdown(segment.text))
                        st.divider()


def render_downloads(record):
    """Download buttons for the transcript and the analysis."""
    st.subheader("📥 Download Files")
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.download_button("📄 Transcript (TXT)", render_txt(record.transcript),
                           file_name="transcript.txt", mime="text/plain")
    with col2:
        st.download_button("🎬 Subtitles (SRT)", render_srt(record.transcript),
                           file_name="transcript.srt", mime="text/plain")
    with col3:
        if record.analysis:
            st.download_button("📊 Analysis (MD)", render_analysis(record.analysis, record.video_info),
                               file_name="analysis.md", mime="text/markdown")
    with col4:
        st.download_button("🧾 Record (JSON)", render_json(record),
                           file_name="analysis.json", mime="application/json")


def main():
    """Main Streamlit application."""

    # Header
    st.markdown('<div class="main-header">🎥 YouTube Video Sense AI</div>', unsafe_allow_html=True)
    st.markdown(
        '<div class="sub-header">Extract transcripts, generate summaries, and gain insights '
        'from YouTube videos using AI.</div>',
        unsafe_allow_html=True
    )

    # Sidebar with status and history
    with st.sidebar:
        st.header("⚙️ Settings")
        st.info("This app uses the server's OpenAI API key. No API key needed from you!")
        st.caption(f"Model: {Config.ANALYSIS_MODEL}")

        st.divider()
        st.subheader("📚 Prior Analyses")
        if st.session_state.history:
            for i, (url, title) in enumerate(st.session_state.history[:10]):
                label = f"📹 {title[:50]}..." if len(title) > 50 else f"📹 {title}"
                if st.button(label, key=f"load_analysis_{i}", use_container_width=True):
                    # Served from the cache, no API call
                    run_analysis(url)
        else:
            st.caption("No prior analyses yet")

    # URL input
    with st.form("video_url_form"):
        url = st.text_input(
            "YouTube Video URL",
            placeholder="Paste YouTube URL here...",
            help="Try with: https://www.youtube.com/watch?v=dQw4w9WgXcQ"
        )
        submitted = st.form_submit_button("🚀 Analyze", type="primary")

    if submitted:
        url = url.strip()
        if not url:
            st.error("Please enter a YouTube URL")
        elif not is_youtube_url(url):
            st.error("Invalid YouTube URL. Please enter a valid YouTube video URL")
        else:
            try:
                Config.validate()
            except ValueError as e:
                st.error(f"✗ Configuration Error: {str(e)}")
            else:
                run_analysis(url)
                if st.session_state.record:
                    st.success("✅ Analysis complete: video transcript and analysis have been generated")

    if st.session_state.error:
        st.error(f"⚠ {st.session_state.error}")

    record = st.session_state.record
    if record is None:
        if not st.session_state.error:
            st.info("👆 Enter a YouTube URL above to get started")
        return

    left, right = st.columns([4, 8])
    with left:
        render_video_info(record.video_info)
        if record.analysis:
            render_analysis_panel(record.analysis)
    with right:
        render_transcript_panel(record)

    st.divider()
    render_downloads(record)


if __name__ == "__main__":
    main()
