import asyncio
import logging

from ..core.config import settings
from ..core.errors import GenerationError, GenerationTimeoutError

logger = logging.getLogger(__name__)


class GenerationClient:
    """
    One prompt in, one completion out.

    `llm` is any LangChain chat model (or object exposing an async `ainvoke`);
    sampling parameters are fixed on the model by `core.llm.get_llm`.
    """

    def __init__(self, llm, timeout: float = settings.generation_timeout_seconds):
        self.llm = llm
        self.timeout = timeout

    async def generate(self, prompt: str) -> str:
        try:
            response = await asyncio.wait_for(self.llm.ainvoke(prompt), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Generation call timed out after {self.timeout}s")
            raise GenerationTimeoutError() from e
        except Exception as e:
            logger.error(f"Generation call failed: {e}")
            raise GenerationError(f"Text generation failed: {e}") from e

        text = response if isinstance(response, str) else getattr(response, "content", None)
        if not isinstance(text, str) or not text:
            logger.error("Generation backend returned no usable output")
            raise GenerationError("Text generation returned no output")

        # first choice, untrimmed
        return text
