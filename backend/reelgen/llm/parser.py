import json
import logging
import re

from pydantic import ValidationError

from reelgen.errors import MalformedResponse
from reelgen.schemas import GenerationResult

logger = logging.getLogger(__name__)


# ============================================================
# FENCE STRIPPING (LLM TRUST BOUNDARY)
# ============================================================

_JSON_FENCE = re.compile(r"```json\n?")
_ANY_FENCE = re.compile(r"```\n?")


def strip_code_fences(text: str) -> str:
    """
    Remove markdown code fences the model may wrap its JSON in.

    A ```json fence wins over a bare ``` fence; every marker is removed,
    not only the outermost pair.
    """
    if "```json" in text:
        text = _ANY_FENCE.sub("", _JSON_FENCE.sub("", text))
    elif "```" in text:
        text = _ANY_FENCE.sub("", text)
    return text.strip()


# ============================================================
# RESULT PARSER
# ============================================================

def parse_generation_result(text: str) -> GenerationResult:
    """
    Turn raw completion text into a validated GenerationResult.

    Invalid JSON and well-formed JSON of the wrong shape both raise
    MalformedResponse. Never returns a partial result.
    """
    if not text or not isinstance(text, str):
        raise MalformedResponse("Empty AI response")

    cleaned = strip_code_fences(text)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse AI response: %s", text)
        raise MalformedResponse() from e

    if not isinstance(data, dict):
        logger.error("AI response is not a JSON object: %s", text)
        raise MalformedResponse("AI response is not a JSON object")

    try:
        return GenerationResult.model_validate(data)
    except ValidationError as e:
        logger.error("AI response has unexpected shape: %s", e)
        raise MalformedResponse("AI response does not match the reel format") from e
