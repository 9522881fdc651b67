"""Quote providers module."""

from tradesim.providers.quote_source import QuoteSource
from tradesim.providers.static_provider import StaticQuoteSource
from tradesim.providers.simulated_provider import SimulatedQuoteSource, DEFAULT_LISTINGS

__all__ = [
    "QuoteSource",
    "StaticQuoteSource",
    "SimulatedQuoteSource",
    "DEFAULT_LISTINGS",
]
