"""passmeter: entropy-based password strength analysis."""

__version__ = "1.0.0"
