"""Ollama LLM client configuration."""

from langchain_ollama import OllamaLLM

from bondcrm.config.settings import Settings, get_settings


def create_json_llm_client(settings: Settings | None = None, use_fallback: bool = False) -> OllamaLLM:
    """Create the extraction LLM from the llm_* application settings.

    Args:
        settings: Optional custom settings.
        use_fallback: If True, use the fallback model instead of primary.

    Returns:
        OllamaLLM instance for JSON-array responses.
    """
    settings = settings or get_settings()
    model = settings.llm_fallback_model_name if use_fallback else settings.llm_model_name

    return OllamaLLM(
        model=model,
        base_url=settings.llm_ollama_base_url,
        temperature=settings.llm_temperature,
        top_p=settings.llm_top_p,
        top_k=settings.llm_top_k,
        num_ctx=settings.llm_num_ctx,
        num_predict=settings.llm_num_predict,
        # format="json" would force an object, not an array; chains.py extracts the array
        client_kwargs={"timeout": settings.llm_request_timeout},
    )


def get_fallback_model_name() -> str:
    return get_settings().llm_fallback_model_name


def get_primary_model_name() -> str:
    return get_settings().llm_model_name
