"""Chess rules engine: legal moves, check and checkmate."""

__version__ = "0.1.0"
