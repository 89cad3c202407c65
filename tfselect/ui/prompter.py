"""
Interactive prompts.

The configuration flow only talks to the Prompter interface so tests can
substitute a scripted implementation.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

import questionary
from prompt_toolkit.key_binding import KeyBindings, merge_key_bindings
from prompt_toolkit.keys import Keys
from questionary import Question, Style

from ..core.errors import PromptCancelled

custom_style = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "fg:white bold"),
    ("answer", "fg:green bold"),
    ("pointer", "fg:cyan bold"),
    ("highlighted", "fg:cyan bold"),
    ("selected", "fg:green"),
    ("instruction", "fg:gray"),
])


def cancel_on_escape(question: Question) -> Question:
    """Make Escape end the prompt with no answer, as Ctrl-C does."""
    bindings = KeyBindings()

    @bindings.add(Keys.Escape, eager=True)
    def _(event):
        event.app.exit(result=None)

    question.application.key_bindings = merge_key_bindings(
        [question.application.key_bindings, bindings]
    )
    return question


class Prompter(ABC):
    """Single-select and free-text prompts."""

    @abstractmethod
    def select_one(
        self, prompt: str, items: Sequence[str], default_index: int = 0
    ) -> Optional[int]:
        """Return the index of the chosen item, or None if cancelled."""

    @abstractmethod
    def input_text(self, prompt: str, default: str, initial: Optional[str] = None) -> str:
        """
        Return the entered text.

        Args:
            prompt: Question shown to the user
            default: Value used when the answer is empty
            initial: Text pre-filled in the field (defaults to default)
        """


class QuestionaryPrompter(Prompter):
    """Prompter backed by questionary."""

    def __init__(self, style: Style = custom_style):
        self.style = style

    def select_one(
        self, prompt: str, items: Sequence[str], default_index: int = 0
    ) -> Optional[int]:
        if not items:
            return None

        question = questionary.select(
            prompt,
            choices=list(items),
            default=items[default_index],
            style=self.style,
        )
        answer = cancel_on_escape(question).ask()

        if answer is None:
            return None
        return list(items).index(answer)

    def input_text(self, prompt: str, default: str, initial: Optional[str] = None) -> str:
        answer = questionary.text(
            prompt,
            default=initial if initial is not None else default,
            style=self.style,
        ).ask()

        if answer is None:
            raise PromptCancelled(f"{prompt} prompt cancelled")
        return answer or default
