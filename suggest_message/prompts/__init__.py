"""Prompt Construction Package"""

from suggest_message.prompts.builder import PromptBuilder

__all__ = ["PromptBuilder"]
