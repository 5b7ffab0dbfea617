from __future__ import annotations
from typing import Optional

import openai
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI

from reviewbrief.core.config_models import ModelSettings
from reviewbrief.core.errors import ModelUnavailable

# The rendered prompt is a template *variable*, never template text, so braces
# inside patches are passed through untouched.
_prompt = ChatPromptTemplate.from_messages([
    ("user", "{prompt}"),
])


def build_chat_model(settings: ModelSettings) -> ChatOpenAI:
    """
    Chat model for a local OpenAI-compatible server (Ollama by default).
    The client retries transient failures itself, up to settings.max_retries.
    """
    return ChatOpenAI(
        model=settings.model_name,
        temperature=settings.temperature,
        max_retries=settings.max_retries,
        base_url=settings.base_url,
        api_key=settings.api_key,
        timeout=settings.timeout_seconds,
    )


class ReviewModel:
    """Sends a rendered prompt to the model and returns the full completion text."""

    def __init__(self, settings: ModelSettings, llm: Optional[BaseChatModel] = None):
        self.settings = settings
        self.llm = llm if llm is not None else build_chat_model(settings)
        self.chain = _prompt | self.llm | StrOutputParser()

    async def invoke(self, prompt_text: str) -> str:
        """Raises ModelUnavailable once the backend has failed past its retries."""
        print(f"[ReviewBrief] 🤖 Asking {self.settings.model_name} at {self.settings.base_url}...")
        try:
            completion = await self.chain.ainvoke({"prompt": prompt_text})
        except openai.APIError as api_error:
            raise ModelUnavailable(
                f"{self.settings.model_name} failed (max_retries={self.settings.max_retries}): {api_error}"
            ) from api_error

        print(f"[ReviewBrief] 📊 Model returned {len(completion)} chars")
        return completion
