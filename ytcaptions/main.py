"""
Main entry point for the YouTube Caption Summarizer application.
"""

import argparse
import sys
from typing import Optional

from dotenv import load_dotenv

from ytcaptions.config import config
from ytcaptions.core.caption_extractor import CaptionExtractor
from ytcaptions.core.page_fetcher import PageFetcher
from ytcaptions.core.summarizer import TranscriptSummarizer
from ytcaptions.models.schemas import StructuredSummary, SummaryConfig, SummaryMode, VideoSummary
from ytcaptions.utils.error_handling import VideoSummarizerError
from ytcaptions.utils.helpers import extract_video_id
from ytcaptions.utils.logger import logging


def summarize_youtube_video(
    url: str,
    mode: SummaryMode = SummaryMode.CONCISE,
    include_metadata: bool = False,
    model: Optional[str] = None,
    model_provider: Optional[str] = None,
) -> VideoSummary:
    """
    Process a YouTube video: fetch the watch page, extract captions, summarize.

    Args:
        url: YouTube video URL
        mode: Summary instruction mode
        include_metadata: Whether to extract title, length and channel
        model: Optional model name overriding the configured default
        model_provider: Optional langchain provider overriding the configured default

    Returns:
        VideoSummary object

    Raises:
        CaptionFetchError: If the page or captions cannot be fetched or parsed
        SummarizationError: If the summarization backend fails
    """
    fetcher = PageFetcher()
    extractor = CaptionExtractor(fetcher)

    # 1. Fetch the watch page
    logging.info(f"Fetching watch page: {url}")
    document = fetcher.fetch(url)

    # 2. Extract metadata and transcript
    captions = extractor.extract(document, include_metadata=include_metadata)

    # 3. Summarize transcript
    summary_config = SummaryConfig(mode=mode)
    if model:
        summary_config.model = model
    if model_provider:
        summary_config.model_provider = model_provider

    summarizer = TranscriptSummarizer(model_provider=summary_config.model_provider)
    logging.info("Generating summary...")
    summary = summarizer.create_summary(captions, summary_config, video_id=extract_video_id(url))
    logging.info("Summary complete.")

    return summary


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Caption Summarizer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--mode", choices=[m.value for m in SummaryMode],
                        default=config.DEFAULT_SUMMARY_MODE,
                        help="Summary style")
    parser.add_argument("--details", action="store_true",
                        help="Also extract title, length and channel")
    parser.add_argument("--model", default=None,
                        help=f"Language model for summarization (default: {config.DEFAULT_SUMMARY_MODEL})")
    parser.add_argument("--provider", default=None,
                        help=f"langchain model provider (default: {config.MODEL_PROVIDER})")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    try:
        summary = summarize_youtube_video(
            args.url,
            mode=SummaryMode(args.mode),
            include_metadata=args.details,
            model=args.model,
            model_provider=args.provider,
        )
    except VideoSummarizerError as e:
        logging.error(f"Error processing video: {str(e)}")
        print("No captions found")
        sys.exit(1)

    # Print the summary
    print("\n" + "=" * 80)
    if summary.metadata:
        print(f"{summary.metadata.title} by {summary.metadata.channel_name} ({summary.metadata.length})")
        print("=" * 80)
    if summary.mode == SummaryMode.STRUCTURED:
        structured = StructuredSummary.from_text(summary.summary)
        print(structured.overview)
        for point in structured.key_points:
            print(f"  * {point}")
    else:
        print(summary.summary)
    print("=" * 80)


if __name__ == "__main__":
    main()
