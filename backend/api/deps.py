"""
FastAPI dependencies for the analysis routes.
"""

from bondcrm.config.settings import Settings, get_settings
from bondcrm.llm.chains import run_trade_extraction_chain
from bondcrm.pipeline.nodes.trade_extraction import TradeExtractor


def get_trade_extractor() -> TradeExtractor:
    """Extractor used by /analyze-transcript. Overridden in tests."""
    return run_trade_extraction_chain


def get_app_settings() -> Settings:
    """Application settings as a dependency."""
    return get_settings()
