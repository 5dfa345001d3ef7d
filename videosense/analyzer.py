"""OpenAI chat-completion request for video analysis."""

import logging

from openai import APIError, AsyncOpenAI

from videosense.config import Config
from videosense.errors import QuotaExceeded

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You are an expert video analyst. You produce clear transcripts and concise, "
    "structured analyses of YouTube videos. Follow the requested output format exactly."
)

# Section names below are what videosense.shaping looks for, keep them in sync
ANALYSIS_PROMPT = """Analyze the YouTube video "{title}" by {creator}.

Produce a transcript of the video, one utterance per line, in the form "Speaker: text".

Then produce the following sections, each starting with its heading on its own line:

Summary:
One paragraph summarising the video.

Key Points:
- One bullet per key point (4-6 bullets)

Topics:
- Topic name (relevance from 1 to 10)

Sentiment:
An overall sentiment score from 0 to 10, followed by positive, neutral or negative.

Questions:
- Three to five follow-up questions a viewer might ask"""


def build_analysis_prompt(title: str, creator: str) -> str:
    """Fill the analysis prompt with the video's title and creator."""
    return ANALYSIS_PROMPT.format(title=title, creator=creator)


def create_client() -> AsyncOpenAI:
    """Create an OpenAI client from the configured key and optional base URL."""
    Config.validate()
    return AsyncOpenAI(
        api_key=Config.OPENAI_API_KEY,
        base_url=Config.OPENAI_BASE_URL or None,
    )


async def request_analysis(
    client: AsyncOpenAI,
    title: str,
    creator: str,
    model: str = None
) -> str:
    """
    Ask the model for a transcript and analysis of a video.

    The request is made exactly once, there is no retry.

    Args:
        client: OpenAI client (or anything exposing ``chat.completions.create``)
        title: Video title embedded in the prompt
        creator: Channel name embedded in the prompt
        model: Model name, defaults to Config.ANALYSIS_MODEL

    Returns:
        Raw completion text, empty if the model returned no content
    """
    analysis_model = model or Config.ANALYSIS_MODEL

    request_params = {
        "model": analysis_model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_analysis_prompt(title, creator)},
        ]
    }

    # Only set temperature if model supports it (gpt-5 models only support default)
    if not analysis_model.startswith("gpt-5"):
        request_params["temperature"] = 0.3

    logger.info("Requesting analysis of %r from %s", title, analysis_model)
    try:
        response = await client.chat.completions.create(**request_params)
    except APIError as e:
        error_msg = str(e)
        if "quota" in error_msg.lower() or "billing" in error_msg.lower():
            raise QuotaExceeded(
                f"OpenAI API quota/billing error: {error_msg}. "
                f"Please check your OpenAI account."
            ) from e
        raise

    return response.choices[0].message.content or ""
