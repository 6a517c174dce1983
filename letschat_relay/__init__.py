"""HTTP relay that forwards conversation payloads to the Anthropic Messages API."""

__version__ = "0.1.0"
