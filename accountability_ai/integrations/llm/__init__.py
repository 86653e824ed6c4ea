"""
LLM providers and routing.

Exports the provider implementations and ``LLMRouter``, which tries the
configured providers in order until one answers.
"""

from .anthropic import AnthropicProvider
from .base import GenerationOptions, LLMProvider, LLMResult
from .google import GoogleProvider
from .ollama import OllamaProvider
from .openai import OpenAIProvider
from .router import LLMRouter

__all__ = [
    "AnthropicProvider",
    "GenerationOptions",
    "GoogleProvider",
    "LLMProvider",
    "LLMResult",
    "LLMRouter",
    "OllamaProvider",
    "OpenAIProvider",
]
