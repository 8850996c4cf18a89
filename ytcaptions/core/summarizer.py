"""
Module for summarizing transcripts using LLM models.
"""

import os
from typing import Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from ytcaptions.config import config, PROVIDER_API_KEYS
from ytcaptions.core.prompts import (
    CONCISE_SYSTEM_TEMPLATE,
    STRUCTURED_SYSTEM_TEMPLATE,
    TRANSCRIPT_HUMAN_TEMPLATE,
)
from ytcaptions.models.schemas import SummaryConfig, SummaryMode, VideoCaptions, VideoSummary
from ytcaptions.utils.error_handling import SummarizationError
from ytcaptions.utils.logger import logging

SYSTEM_TEMPLATES = {
    SummaryMode.CONCISE: CONCISE_SYSTEM_TEMPLATE,
    SummaryMode.STRUCTURED: STRUCTURED_SYSTEM_TEMPLATE,
}


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, model_provider: Optional[str] = None, api_key: Optional[str] = None):
        """
        Initialize the summarizer with API key.

        Args:
            model_provider: langchain provider name (defaults to config)
            api_key: Provider API key (if None, will try to get from environment)
        """
        self.model_provider = model_provider or config.MODEL_PROVIDER
        key_env = PROVIDER_API_KEYS.get(self.model_provider)
        if not key_env:
            raise SummarizationError(f"Unsupported model provider: {self.model_provider}")

        self.api_key = api_key or os.getenv(key_env)
        if not self.api_key:
            raise SummarizationError(f"{key_env} is required. Set it in .env file or pass directly.")

        os.environ[key_env] = self.api_key

    @staticmethod
    def build_prompt(mode: SummaryMode) -> ChatPromptTemplate:
        """Prompt with the mode's system persona and the transcript as the user turn."""
        return ChatPromptTemplate.from_messages([
            ("system", SYSTEM_TEMPLATES[mode]),
            ("human", TRANSCRIPT_HUMAN_TEMPLATE),
        ])

    def summarize(self, transcript_text: str, config: SummaryConfig) -> str:
        """
        Summarize a transcript text.

        The transcript is sent verbatim in a single request; no chunking or
        truncation happens here.

        Args:
            transcript_text: Full transcript text to summarize
            config: Configuration for summarization

        Returns:
            Summary text trimmed of surrounding whitespace, or "" if the
            backend returned no content

        Raises:
            SummarizationError: If the backend call fails
        """
        messages = self.build_prompt(config.mode).format_messages(transcript=transcript_text)

        logging.info(
            f"Summarizing {len(transcript_text)} characters with {config.model_provider}:"
            f"{config.model} in {config.mode.value} mode (max_tokens={config.max_tokens})"
        )
        try:
            llm = init_chat_model(
                model=config.model,
                model_provider=config.model_provider,
                temperature=config.temperature,
                max_tokens=config.max_tokens,
            )
            response = llm.invoke(messages)
        except Exception as e:
            logging.error(f"Error summarizing captions: {str(e)}")
            raise SummarizationError(f"Summarization failed: {str(e)}") from e

        content = getattr(response, "content", None)
        if not isinstance(content, str):
            return ""
        return content.strip()

    def create_summary(self, captions: VideoCaptions, config: SummaryConfig,
                       video_id: Optional[str] = None) -> VideoSummary:
        """
        Create a full video summary.

        Args:
            captions: Extracted transcript and optional metadata
            config: Configuration for summarization
            video_id: Optional YouTube video ID

        Returns:
            VideoSummary object
        """
        summary = self.summarize(captions.transcript, config)

        return VideoSummary(
            video_id=video_id,
            metadata=captions.metadata,
            summary=summary,
            transcript_text=captions.transcript,
            mode=config.mode,
        )
