"""
Terminal user interface for tfselect.
"""

from .prompter import Prompter, QuestionaryPrompter

__all__ = ["Prompter", "QuestionaryPrompter"]
