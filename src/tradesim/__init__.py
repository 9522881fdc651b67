"""Trading simulator backend: ledger core, valuation and watchlist services."""

__version__ = "0.1.0"
