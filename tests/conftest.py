from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from starterkit.config import Settings  # noqa: E402
from starterkit.package_manager import PackageManagerInfo  # noqa: E402
from starterkit.prompts import Choice  # noqa: E402


class ScriptedPrompter:
    """Answer prompts from a list and record what was asked."""

    def __init__(self, answers: Sequence[Any] = ()) -> None:
        self.answers = list(answers)
        self.asked: list[tuple[str, str]] = []

    def _next(self) -> Any:
        if not self.answers:
            raise AssertionError("prompter ran out of scripted answers")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def text(self, message: str, *, default: str = "", validate=None) -> str:
        self.asked.append(("text", message))
        while True:
            answer = self._next()
            if answer is None:
                answer = default
            if validate is None or validate(answer) is True:
                return answer

    def select(self, message: str, choices: Sequence[Choice], *, initial: int = 0) -> Any:
        self.asked.append(("select", message))
        answer = self._next()
        if isinstance(answer, int):
            return choices[answer].value
        return answer


@pytest.fixture()
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture()
def templates_root(tmp_path: Path) -> Path:
    """A templates root with a plain and a React flavoured local template."""

    root = tmp_path / "templates"

    vue = root / "template-vue"
    (vue / "src").mkdir(parents=True)
    (vue / "package.json").write_text(
        json.dumps({"name": "template-placeholder", "version": "0.0.0"}, indent=2),
        encoding="utf-8",
    )
    (vue / "_gitignore").write_text("node_modules\n", encoding="utf-8")
    (vue / "src" / "main.js").write_text("console.log('hi')\n", encoding="utf-8")

    for name, config in (("react", "vite.config.js"), ("react-ts", "vite.config.ts")):
        react = root / f"template-{name}"
        react.mkdir(parents=True)
        (react / "package.json").write_text(
            '{\n  "name": "template-placeholder",\n  "devDependencies": {\n'
            '    "@vitejs/plugin-react": "^4.3.4",\n    "vite": "^6.0.5"\n  }\n}\n',
            encoding="utf-8",
        )
        (react / "_gitignore").write_text("dist\n", encoding="utf-8")
        (react / config).write_text(
            "import react from '@vitejs/plugin-react'\n\nexport default { plugins: [react()] }\n",
            encoding="utf-8",
        )

    return root


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture()
def settings(workspace: Path, templates_root: Path) -> Settings:
    return Settings(
        cwd=workspace,
        templates_root=templates_root,
        package_manager=PackageManagerInfo("npm"),
    )
