"""LLM client and chain configurations."""

from .client import create_json_llm_client
from .chains import LLMChainError, parse_trade_candidates, run_trade_extraction_chain

__all__ = [
    "LLMChainError",
    "create_json_llm_client",
    "parse_trade_candidates",
    "run_trade_extraction_chain",
]
