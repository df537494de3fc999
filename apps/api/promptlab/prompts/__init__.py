"""
LLM prompt templates for framework-structured prompt generation.

The model picks TCREI, CLEAR or a combination and answers in two parts:
  1. "**Framework-Wahl:** <one sentence>"
  2. the structured prompt, one "<LETTER> – <content>" line per element
"""

from .framework_prompt import PROMPT_FRAMEWORK_GENERATOR, fill_prompt, get_framework_prompt
from .frameworks import (
    CLEAR,
    FRAMEWORKS,
    KNOWN_ELEMENT_LETTERS,
    TCREI,
    Framework,
    FrameworkElement,
)

__all__ = [
    "PROMPT_FRAMEWORK_GENERATOR",
    "fill_prompt",
    "get_framework_prompt",
    "CLEAR",
    "FRAMEWORKS",
    "KNOWN_ELEMENT_LETTERS",
    "TCREI",
    "Framework",
    "FrameworkElement",
]
