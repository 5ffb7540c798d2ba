"""
Generative chat model factory.

Dependencies: langchain_google_genai, docrag.configs
System role: Builds the streaming chat model used by the answer composer
"""

import logging

from dotenv import load_dotenv
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from docrag.configs import Settings, get_settings

load_dotenv()
logger = logging.getLogger(__name__)


def get_chat_model(settings: Settings | None = None) -> BaseChatModel:
    """
    Build the Google Gemini chat model from configuration.

    Args:
        settings: Application settings (cached settings if None)

    Returns:
        ChatGoogleGenerativeAI instance
    """
    config = (settings or get_settings()).generation
    logger.info(f"{__name__}:get_chat_model - model={config.model}, temperature={config.temperature}")
    return ChatGoogleGenerativeAI(
        model=config.model,
        temperature=config.temperature,
    )
