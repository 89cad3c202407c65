"""Shared fixtures: a scripted prompter and a fake infra directory tree."""

from typing import List, Optional, Sequence

import pytest

from tfselect.ui.prompter import Prompter


class ScriptedPrompter(Prompter):
    """
    Answers prompts from a queue.

    select answers are either an item string (looked up in the offered
    items) or None for cancellation. text answers are strings, or None
    to accept the default.
    """

    def __init__(self, selects=(), texts=()):
        self.selects: List = list(selects)
        self.texts: List = list(texts)
        self.calls: List[tuple] = []

    def select_one(self, prompt: str, items: Sequence[str], default_index: int = 0) -> Optional[int]:
        self.calls.append(("select", prompt, list(items), default_index))
        answer = self.selects.pop(0)
        if answer is None:
            return None
        return list(items).index(answer)

    def input_text(self, prompt: str, default: str, initial: Optional[str] = None) -> str:
        self.calls.append(("text", prompt, default, initial))
        answer = self.texts.pop(0)
        return default if answer is None else answer


@pytest.fixture
def infra_root(tmp_path):
    """
    infra/
      prod/us-east-1/vpc
      prod/eu-west-1/
      staging/us-east-1/
      terraform/          (module source, never an environment)
    """
    root = tmp_path / "infra"
    (root / "prod" / "us-east-1" / "vpc").mkdir(parents=True)
    (root / "prod" / "eu-west-1").mkdir(parents=True)
    (root / "staging" / "us-east-1").mkdir(parents=True)
    (root / "terraform").mkdir(parents=True)
    (root / "README.md").write_text("not a directory")
    return root
