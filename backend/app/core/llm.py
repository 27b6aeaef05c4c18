from langchain_groq import ChatGroq
from ..core.config import Settings, settings as default_settings


def get_llm(settings: Settings = default_settings):
    """
    Factory function to create the chat model used for every generation call.
    Centralized so routes / workflows never create models directly.
    """
    llm = ChatGroq(
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        timeout=settings.generation_timeout_seconds,
        api_key=settings.groq_api_key,
    )
    # sent with every completion request
    return llm.bind(
        top_p=settings.llm_top_p,
        frequency_penalty=settings.llm_frequency_penalty,
        presence_penalty=settings.llm_presence_penalty,
    )
