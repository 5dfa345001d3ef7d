"""Interactive main entry point for YouTube video analysis."""

import sys
from pathlib import Path

from videosense.config import Config, configure_logging
from videosense.errors import AnalysisFailed
from videosense.models import VideoAnalysisRecord
from videosense.pipeline import analyze_video
from videosense.store import create_store
from videosense.writers.analysis_writer import sentiment_label, write_analysis
from videosense.writers.json_writer import write_json
from videosense.writers.srt_writer import write_srt
from videosense.writers.txt_writer import format_clock, write_txt
from videosense.youtube import extract_video_id, is_youtube_url


def print_record(record: VideoAnalysisRecord) -> None:
    """Print the analysis of a video to the terminal."""
    info = record.video_info
    analysis = record.analysis

    print("=" * 60)
    print(info.title)
    print(f"by {info.creator}")
    print("=" * 60)

    if analysis:
        print()
        print("SUMMARY")
        print(analysis.summary)
        print()
        print(f"Sentiment: {sentiment_label(analysis.sentiment_score)} ({analysis.sentiment_score:.2f})")
        print()
        print("KEY POINTS")
        for point in analysis.key_points:
            print(f"  - {point}")
        print()
        print("TOPICS")
        for topic in analysis.topics:
            print(f"  - {topic.name} ({round(topic.relevance * 100)}%)")
        print()
        print("QUESTIONS")
        for question in analysis.questions:
            print(f"  ? {question}")

    if record.chapters:
        print()
        print("CHAPTERS")
        for chapter in record.chapters:
            print(
                f"  {chapter.title} [{format_clock(chapter.start_time)} - {format_clock(chapter.end_time)}]"
                f" {len(chapter.segments)} segments"
            )
    print("=" * 60)


def save_exports(record: VideoAnalysisRecord, output_root: Path) -> Path:
    """
    Write transcript and analysis files for a record.

    Files go into a subdirectory of ``output_root`` named after the video ID.

    Returns:
        The directory the files were written to
    """
    output_dir = output_root / (extract_video_id(record.video_url) or "video")
    output_dir.mkdir(parents=True, exist_ok=True)

    write_json(record, output_dir / "analysis.json")
    write_txt(record.transcript, output_dir / "transcript_with_timestamps.txt")
    write_srt(record.transcript, output_dir / "transcript.srt")
    if record.analysis:
        write_analysis(record.analysis, output_dir / "analysis.md", record.video_info)
    return output_dir


def main():
    """Interactive main function."""
    configure_logging()

    print("=" * 60)
    print("Video Sense AI")
    print("=" * 60)
    print()

    # Validate configuration
    try:
        Config.validate()
    except ValueError as e:
        print(f"✗ Configuration Error: {str(e)}", file=sys.stderr)
        print("\nPlease create a .env file with your OPENAI_API_KEY.")
        print("See .env.example for reference.")
        sys.exit(1)

    store = create_store()

    while True:
        print()
        print("-" * 60)
        url = input("Please paste the URL of the YouTube video you wish to analyze: ").strip()

        if not url:
            print("No URL provided. Exiting...")
            break

        if not is_youtube_url(url):
            print("✗ Invalid YouTube URL. Please enter a valid YouTube video URL.")
            continue

        print()
        print("Analyzing the video with AI. This may take a moment...")
        print()

        try:
            record = analyze_video(url, store=store)
            print("✓ Analysis complete")
            print()
            print_record(record)

            save = input("Save transcript and analysis files? (y/n): ").strip().lower()
            if save in ('y', 'yes'):
                output_dir = save_exports(record, Config.OUT_DIR)
                print(f"✓ Files saved to: {output_dir}")
        except AnalysisFailed as e:
            print()
            print("=" * 60)
            print(f"✗ {str(e)}")
            print("=" * 60)

        print()
        another = input("Would you like to analyze another video? (y/n): ").strip().lower()
        if another not in ('y', 'yes'):
            break

    print()
    print("Thank you for using Video Sense AI!")


if __name__ == "__main__":
    main()
