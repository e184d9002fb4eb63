"""Spark Service

Turns an idea into brainstorming suggestions (hooks, an outline or title
variations) through an OpenAI-compatible chat completion gateway.
"""
import logging
from typing import Dict, Optional

import openai
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI

from cim import config
from .models import SparkRequest, SparkType
from .prompts import hooks_prompt_template, outline_prompt_template, titles_prompt_template

logger = logging.getLogger(__name__)

NO_SUGGESTIONS = "No suggestions generated."

SPARK_PROMPTS: Dict[SparkType, ChatPromptTemplate] = {
    SparkType.HOOKS: hooks_prompt_template,
    SparkType.OUTLINE: outline_prompt_template,
    SparkType.TITLES: titles_prompt_template,
}


class SparkError(Exception):
    """Suggestion generation failed"""
    status_code = 500


class SparkRateLimitError(SparkError):
    status_code = 429

    def __init__(self, message: str = "Rate limit exceeded. Please try again in a moment."):
        super().__init__(message)


class SparkQuotaError(SparkError):
    status_code = 402

    def __init__(self, message: str = "AI credits exhausted. Please add credits to continue using CIM Spark."):
        super().__init__(message)


def idea_details(description: Optional[str], content: Optional[str]) -> str:
    """Optional description and notes lines shown under the title"""
    lines = []
    if description:
        lines.append(f"Description: {description}")
    if content:
        lines.append(f"Notes: {content}")
    return "\n".join(lines)


class SparkService:
    def __init__(self, llm: Optional[ChatOpenAI] = None):
        self._llm = llm

    @property
    def llm(self) -> ChatOpenAI:
        if self._llm is None:
            if not config.LLM_API_KEY:
                raise SparkError("LLM_API_KEY is not configured")
            self._llm = ChatOpenAI(
                model=config.SPARK_MODEL,
                api_key=config.LLM_API_KEY,
                base_url=config.LLM_BASE_URL,
                temperature=0.7,
                max_retries=0,
            )
        return self._llm

    async def generate(self, request: SparkRequest) -> str:
        chain = SPARK_PROMPTS[request.spark_type] | self.llm

        try:
            response = await chain.ainvoke({
                "title": request.title,
                "details": idea_details(request.description, request.content),
            })
        except openai.RateLimitError as e:
            logger.warning(f"Spark gateway rate limited: {e}")
            raise SparkRateLimitError() from e
        except openai.APIStatusError as e:
            if e.status_code == 402:
                logger.warning("Spark gateway credits exhausted")
                raise SparkQuotaError() from e
            logger.error(f"Spark gateway error: {e.status_code} {e.message}")
            raise SparkError("Failed to generate suggestions") from e
        except Exception as e:
            logger.error(f"CIM Spark error: {e}")
            raise SparkError("Failed to generate suggestions") from e

        return str(response.content) or NO_SUGGESTIONS
