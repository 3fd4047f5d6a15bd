"""Plot tasks on a priority matrix and ask an LLM for a strategic summary."""

__version__ = "0.1.0"
