"""Prompts for spark generation"""
from .spark_prompt import (
    SPARK_SYSTEM_PROMPT,
    hooks_prompt_template,
    outline_prompt_template,
    titles_prompt_template,
)

__all__ = [
    'SPARK_SYSTEM_PROMPT',
    'hooks_prompt_template',
    'outline_prompt_template',
    'titles_prompt_template',
]
