import os
from typing import Any, Optional
from dataclasses import dataclass

from dotenv import load_dotenv
load_dotenv()

from langchain_core.messages import BaseMessage
from langchain_openai import ChatOpenAI


CHAT_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.7"))
TOP_P = float(os.getenv("LLM_TOP_P", "0.95"))
MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "2048"))
TIMEOUT_S = float(os.getenv("LLM_TIMEOUT", "60"))
MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", "2"))

# Value shipped in .env templates; treated the same as no key at all
PLACEHOLDER_API_KEY = "your_openai_api_key_here"


@dataclass
class LLMConfig:
    api_key: Optional[str] = None
    chat_model: str = CHAT_MODEL
    temperature: float = TEMPERATURE
    top_p: float = TOP_P
    max_tokens: int = MAX_TOKENS
    timeout: float = TIMEOUT_S
    max_retries: int = MAX_RETRIES

    @classmethod
    def from_env(cls) -> "LLMConfig":
        return cls(api_key=os.getenv("OPENAI_API_KEY"))

    def has_credentials(self) -> bool:
        key = (self.api_key or "").strip()
        return bool(key) and key != PLACEHOLDER_API_KEY


def build_chat_model(cfg: LLMConfig) -> ChatOpenAI:
    return ChatOpenAI(
        model=cfg.chat_model,
        api_key=cfg.api_key,
        temperature=cfg.temperature,
        top_p=cfg.top_p,
        max_tokens=cfg.max_tokens,
        timeout=cfg.timeout,
        max_retries=cfg.max_retries,
    )


def message_text(message: Any) -> str:
    """Flatten a chat model reply (plain string or content blocks) to text."""
    content = message.content if isinstance(message, BaseMessage) else message
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(str(block.get("text", "")))
        return "".join(parts)
    return str(content or "")
