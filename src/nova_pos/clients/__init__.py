"""LLM client implementations for Nova POS."""

from nova_pos.clients.gemini import GeminiClient, GeminiResponse

__all__ = ["GeminiClient", "GeminiResponse"]
