"""Context window and output token limits for known LLM models."""

from typing import NamedTuple, Optional

DEFAULT_CONTEXT_WINDOW = 128000
DEFAULT_MAX_OUTPUT_TOKENS = 4096
DEFAULT_TEMPERATURE = 0.7


class ModelSpecs(NamedTuple):
    context_window: int
    max_output_tokens: int


MODEL_SPECS: dict[str, ModelSpecs] = {
    # OpenAI
    "gpt-4o": ModelSpecs(128000, 16384),
    "gpt-4o-mini": ModelSpecs(128000, 16384),
    "gpt-4-turbo": ModelSpecs(128000, 4096),
    "gpt-4-turbo-preview": ModelSpecs(128000, 4096),
    "gpt-4": ModelSpecs(8192, 8192),
    "gpt-4-32k": ModelSpecs(32768, 32768),
    "gpt-3.5-turbo": ModelSpecs(16384, 4096),
    "gpt-3.5-turbo-16k": ModelSpecs(16384, 4096),
    "o1": ModelSpecs(200000, 100000),
    "o1-preview": ModelSpecs(128000, 32768),
    "o1-mini": ModelSpecs(128000, 65536),
    "o3": ModelSpecs(200000, 100000),
    "o3-mini": ModelSpecs(200000, 100000),
    "o4-mini": ModelSpecs(200000, 100000),
    "gpt-4.1": ModelSpecs(1048576, 32768),
    "gpt-4.1-mini": ModelSpecs(1048576, 32768),

    # Anthropic
    "claude-opus-4": ModelSpecs(200000, 128000),
    "claude-sonnet-4": ModelSpecs(200000, 16384),
    "claude-sonnet-4-5": ModelSpecs(1000000, 16384),
    "claude-haiku-4": ModelSpecs(200000, 8192),
    "claude-3-5-sonnet": ModelSpecs(200000, 8192),
    "claude-3-5-sonnet-20241022": ModelSpecs(200000, 8192),
    "claude-3-5-haiku": ModelSpecs(200000, 8192),
    "claude-3-opus": ModelSpecs(200000, 4096),
    "claude-3-opus-20240229": ModelSpecs(200000, 4096),
    "claude-3-sonnet": ModelSpecs(200000, 4096),
    "claude-3-sonnet-20240229": ModelSpecs(200000, 4096),
    "claude-3-haiku": ModelSpecs(200000, 4096),
    "claude-3-haiku-20240307": ModelSpecs(200000, 4096),

    # Google
    "gemini-2.5-pro": ModelSpecs(1048576, 65536),
    "gemini-2.5-flash": ModelSpecs(1048576, 65536),
    "gemini-2.5-flash-lite": ModelSpecs(1048576, 65536),
    "gemini-2.0-flash": ModelSpecs(1048576, 8192),
    "gemini-2.0-pro": ModelSpecs(2000000, 8192),
    "gemini-1.5-pro": ModelSpecs(2000000, 8192),
    "gemini-1.5-flash": ModelSpecs(1048576, 8192),

    # Zhipu
    "glm-4.7": ModelSpecs(200000, 128000),
    "glm-4.7-flash": ModelSpecs(200000, 128000),
    "glm-4.7-flashx": ModelSpecs(200000, 128000),
    "glm-4.6": ModelSpecs(200000, 128000),
    "glm-4": ModelSpecs(128000, 4096),
    "glm-4-plus": ModelSpecs(128000, 4096),
    "glm-3-turbo": ModelSpecs(128000, 4096),

    # DeepSeek
    "deepseek-chat": ModelSpecs(128000, 8000),
    "deepseek-reasoner": ModelSpecs(128000, 8000),
    "deepseek-coder": ModelSpecs(128000, 16384),

    # Groq-hosted
    "llama-3.1-8b-instant": ModelSpecs(131072, 131072),
    "llama-3.1-70b-versatile": ModelSpecs(131072, 131072),
    "llama-3.3-70b-versatile": ModelSpecs(131072, 32768),
    "llama-3.2-1b-preview": ModelSpecs(131072, 8192),
    "llama-3.2-3b-preview": ModelSpecs(131072, 8192),
    "llama-3.2-11b-vision-preview": ModelSpecs(131072, 8192),
    "llama-3.2-90b-vision-preview": ModelSpecs(131072, 8192),
    "mixtral-8x7b-32768": ModelSpecs(32768, 32768),
    "gemma2-9b-it": ModelSpecs(8192, 8192),
    "deepseek-r1-distill-llama-70b": ModelSpecs(131072, 131072),

    # Mistral
    "mistral-large-2407": ModelSpecs(128000, 128000),
    "mistral-large-3": ModelSpecs(128000, 128000),
    "mistral-medium-3": ModelSpecs(128000, 128000),
    "mistral-small-3.1": ModelSpecs(128000, 128000),
    "mistral-7b": ModelSpecs(128000, 8192),
    "codestral-latest": ModelSpecs(128000, 128000),
    "codestral-25-08": ModelSpecs(128000, 128000),
    "mixtral-8x7b": ModelSpecs(32768, 32768),
    "mixtral-8x22b": ModelSpecs(65536, 65536),
    "pixtral-large": ModelSpecs(128000, 128000),

    # Meta (Hugging Face ids)
    "meta-llama/Llama-3.1-8B": ModelSpecs(131072, 131072),
    "meta-llama/Llama-3.1-70B": ModelSpecs(131072, 131072),
    "meta-llama/Llama-3.1-405B": ModelSpecs(131072, 131072),
    "meta-llama/Llama-3.2-1B": ModelSpecs(131072, 131072),
    "meta-llama/Llama-3.2-3B": ModelSpecs(131072, 131072),
    "meta-llama/Llama-3.2-11B-Vision": ModelSpecs(131072, 131072),
    "meta-llama/Llama-3.2-90B-Vision": ModelSpecs(131072, 131072),
    "meta-llama/Llama-3.3-70B": ModelSpecs(131072, 131072),
    "meta-llama/Llama-3-8B": ModelSpecs(8192, 2048),
    "meta-llama/Llama-3-70B": ModelSpecs(8192, 2048),

    # Moonshot
    "kimi-k1.5": ModelSpecs(128000, 8192),
    "kimi-k2": ModelSpecs(256000, 8192),
    "kimi-k2.5": ModelSpecs(256000, 8192),
    "moonshot-v1-8k": ModelSpecs(8192, 4096),
    "moonshot-v1-32k": ModelSpecs(32768, 4096),
    "moonshot-v1-128k": ModelSpecs(131072, 4096),

    # MiniMax
    "minimax-m2.5": ModelSpecs(1000000, 1000000),
    "minimax-m2.5-lightning": ModelSpecs(1000000, 1000000),
    "minimax-m2": ModelSpecs(1000000, 1000000),
    "minimax-m2.1": ModelSpecs(1000000, 1000000),
    "minimax-2.5": ModelSpecs(24576, 8192),
}


def get_model_specs(model: str) -> Optional[ModelSpecs]:
    """Return the limits for ``model``, or None if it is not in the table."""
    return MODEL_SPECS.get(model)


def get_context_window(model: str) -> int:
    specs = MODEL_SPECS.get(model)
    return specs.context_window if specs else DEFAULT_CONTEXT_WINDOW


def get_max_output_tokens(model: str) -> int:
    specs = MODEL_SPECS.get(model)
    return specs.max_output_tokens if specs else DEFAULT_MAX_OUTPUT_TOKENS
