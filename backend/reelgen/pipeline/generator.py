import logging

from reelgen.llm.base import LLMClient
from reelgen.llm.parser import parse_generation_result
from reelgen.pipeline.context import GenerationContext, GenerationStage
from reelgen.prompts import build_prompts
from reelgen.schemas import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


def run_generation(
    request: GenerationRequest,
    client: LLMClient,
    context: GenerationContext | None = None,
) -> GenerationContext:
    """
    Runs one generation transaction and returns its context.

    The chain is linear: build prompts, call the model once, parse.
    Any exception moves the context to FAILED and is re-raised; there
    are no retries.
    """
    if context is None:
        context = GenerationContext(request=request)

    try:
        _transition(context, GenerationStage.BUILDING_PROMPT)
        context.system_prompt, context.user_prompt = build_prompts(request)

        _transition(context, GenerationStage.CALLING_MODEL)
        context.raw_response = client.generate([
            {"role": "system", "content": context.system_prompt},
            {"role": "user", "content": context.user_prompt},
        ])

        _transition(context, GenerationStage.PARSING_RESPONSE)
        context.result = parse_generation_result(context.raw_response)

        _transition(context, GenerationStage.RESPONDING)
    except Exception as e:
        context.fail(e)
        logger.error(
            "Reel generation failed after %s: %s",
            context.history[-2].value,
            e,
        )
        raise

    return context


def generate_reel(request: GenerationRequest, client: LLMClient) -> GenerationResult:
    return run_generation(request, client).result


def _transition(context: GenerationContext, stage: GenerationStage):
    logger.debug("generate-reel: %s -> %s", context.stage.value, stage.value)
    context.advance(stage)
