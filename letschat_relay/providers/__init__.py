from .anthropic import AnthropicProvider
from .types import ProviderRequest, ProviderResponse

__all__ = ["AnthropicProvider", "ProviderRequest", "ProviderResponse"]
