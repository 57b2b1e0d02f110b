"""Olivia chat proxy: relays chat messages to the OpenAI completions API."""

__version__ = "1.0.0"
