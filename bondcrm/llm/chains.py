"""LangChain chains for LLM operations."""

import json
import re

import structlog
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from tenacity import retry, stop_after_attempt, wait_exponential

from bondcrm.config.prompts import TRADE_EXTRACTION_SYSTEM_PROMPT, TRADE_EXTRACTION_USER_PROMPT
from bondcrm.config.settings import get_settings
from bondcrm.llm.client import create_json_llm_client, get_fallback_model_name, get_primary_model_name

logger = structlog.get_logger(__name__)

INVALID_JSON_MESSAGE = "AI returned invalid JSON"


class LLMChainError(Exception):
    """Error during LLM chain execution."""

    def __init__(self, message: str, raw: str | None = None):
        super().__init__(message)
        self.raw = raw


def _extract_json_array_from_text(text: str) -> str | None:
    """Try to extract a JSON array from text that may contain other content.

    Handles cases where model outputs thinking/reasoning before JSON.

    Args:
        text: Text that may contain a JSON array.

    Returns:
        Extracted JSON string or None.
    """
    depth = 0
    start_idx = None
    in_string = False
    escape_next = False

    for i, char in enumerate(text):
        # Brackets inside strings do not count
        if escape_next:
            escape_next = False
            continue
        if char == '\\' and in_string:
            escape_next = True
            continue
        if char == '"':
            in_string = not in_string
            continue
        if in_string:
            continue

        if char == '[':
            if depth == 0:
                start_idx = i
            depth += 1
        elif char == ']' and depth > 0:
            depth -= 1
            if depth == 0 and start_idx is not None:
                return text[start_idx:i + 1]

    return None


def _clean_json_string(text: str) -> str:
    """Clean common issues in JSON strings from LLM output.

    Args:
        text: Raw JSON string.

    Returns:
        Cleaned JSON string.
    """
    # Remove any BOM or zero-width characters
    text = text.strip('\ufeff\u200b\u200c\u200d')

    # Remove trailing commas before } or ] (invalid JSON but common LLM mistake)
    text = re.sub(r',(\s*[}\]])', r'\1', text)

    return text


def _strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` block if present."""
    match = re.search(r"```(?:json)?\s*([\s\S]*?)\s*```", text, re.IGNORECASE)
    if match:
        return match.group(1).strip()
    return text


def _invoke_with_fallback(
    prompt: ChatPromptTemplate,
    variables: dict,
    context_name: str = "chain",
) -> tuple[str, str]:
    """Invoke LLM chain with automatic fallback on empty response.

    Args:
        prompt: The ChatPromptTemplate to use.
        variables: Variables to pass to the prompt.
        context_name: Name for logging context.

    Returns:
        Tuple of (response_text, model_used).

    Raises:
        LLMChainError: If both primary and fallback return empty.
    """
    primary_model = get_primary_model_name()
    chain = prompt | create_json_llm_client(use_fallback=False) | StrOutputParser()

    logger.debug(f"{context_name}_trying_primary", model=primary_model)
    response = chain.invoke(variables)

    if response and response.strip():
        logger.debug(f"{context_name}_primary_success", model=primary_model, length=len(response))
        return response, primary_model

    fallback_model = get_fallback_model_name()
    logger.warning(
        f"{context_name}_primary_empty_trying_fallback",
        primary_model=primary_model,
        fallback_model=fallback_model,
    )

    chain_fallback = prompt | create_json_llm_client(use_fallback=True) | StrOutputParser()
    response = chain_fallback.invoke(variables)

    if response and response.strip():
        logger.info(f"{context_name}_fallback_success", model=fallback_model, length=len(response))
        return response, fallback_model

    raise LLMChainError(f"Both primary ({primary_model}) and fallback ({fallback_model}) returned empty responses")


def parse_trade_candidates(response: str) -> list[dict]:
    """Parse the list of trade candidates from an LLM response.

    A valid JSON value that is not an array means "no activities". Entries
    that are not JSON objects are dropped.

    Args:
        response: Raw LLM response string.

    Returns:
        List of candidate dicts.

    Raises:
        LLMChainError: If no JSON can be recovered from the response.
    """
    if not response or not response.strip():
        raise LLMChainError("Empty response from LLM", raw=response)

    text = _strip_code_fences(response.strip())

    logger.debug(
        "raw_llm_response",
        response_length=len(text),
        preview=text[:500],
    )

    parsed = None
    try:
        parsed = json.loads(_clean_json_string(text))
    except json.JSONDecodeError as e:
        logger.debug("direct_parse_failed", error=str(e))

        # Model wrote something before or after the array
        extracted = _extract_json_array_from_text(text)
        if extracted is None:
            logger.error("json_parse_error", response_preview=text[:300])
            raise LLMChainError(INVALID_JSON_MESSAGE, raw=response) from e
        try:
            parsed = json.loads(_clean_json_string(extracted))
        except json.JSONDecodeError as inner:
            logger.error("json_parse_error", response_preview=text[:300], error=str(inner))
            raise LLMChainError(INVALID_JSON_MESSAGE, raw=response) from inner

    if not isinstance(parsed, list):
        logger.warning("llm_response_not_a_list", response_type=type(parsed).__name__)
        return []

    candidates = [item for item in parsed if isinstance(item, dict)]
    if len(candidates) != len(parsed):
        logger.warning("dropped_non_object_candidates", dropped=len(parsed) - len(candidates))

    return candidates


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=30),
    reraise=True,
)
def run_trade_extraction_chain(transcript: str) -> list[dict]:
    """Ask the LLM for the trades discussed in a chat transcript.

    Args:
        transcript: Raw chat transcript.

    Returns:
        List of trade candidate dicts as proposed by the model.
    """
    prompt = ChatPromptTemplate.from_messages([
        ("system", TRADE_EXTRACTION_SYSTEM_PROMPT),
        ("human", TRADE_EXTRACTION_USER_PROMPT),
    ])

    logger.debug("running_trade_extraction", text_length=len(transcript))

    response, model_used = _invoke_with_fallback(
        prompt=prompt,
        variables={
            "transcript": transcript,
            "default_currency": get_settings().default_currency,
        },
        context_name="trade_extraction",
    )

    candidates = parse_trade_candidates(response)

    logger.debug(
        "trade_extraction_complete",
        model_used=model_used,
        candidates_found=len(candidates),
    )

    return candidates
