"""LLM prompt templates for commit message generation."""

from vcsnote.llm.prompts.system import SYSTEM_PROMPT


__all__ = [
    "SYSTEM_PROMPT",
]
