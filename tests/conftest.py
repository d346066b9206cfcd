"""Shared fixtures for plates tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from plates.rendering.functions import FunctionEnvironment
from plates.rendering.prompt import Prompter
from plates.store import TemplateStore


class ScriptedInput:
    """Stands in for ``input``: replays answers, then behaves like closed input."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def scripted_input():
    return ScriptedInput


@pytest.fixture
def store(tmp_path: Path) -> TemplateStore:
    templates = TemplateStore(tmp_path / "store")
    templates.setup()
    return templates


@pytest.fixture
def dest(tmp_path: Path) -> Path:
    return tmp_path / "project"


@pytest.fixture
def write_template(store: TemplateStore):
    def _write(name: str, source: str) -> Path:
        path = store.path_for(name)
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def functions() -> FunctionEnvironment:
    """Function environment whose prompts fail if anything asks."""
    return FunctionEnvironment(["plates", "out"], Prompter(input_fn=ScriptedInput()))
