"""In-memory stand-ins for the operator, git and the GitHub API."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Optional, Sequence

import httpx

from flagpr.git.client import GitRemote
from flagpr.github.client.github_client import GitHubClient


class FakeInteraction:
    def __init__(self, text_answers: Sequence[Optional[str]] = (), pick_answers: Sequence[Optional[str]] = ()):
        self.text_answers = list(text_answers)
        self.pick_answers = list(pick_answers)
        self.pick_calls: list[list[str]] = []
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.opened: list[str] = []

    async def ask_text(self, prompt: str, placeholder: str = "") -> Optional[str]:
        return self.text_answers.pop(0) if self.text_answers else None

    async def pick(self, choices: Sequence[str], placeholder: str = "") -> Optional[str]:
        self.pick_calls.append(list(choices))
        return self.pick_answers.pop(0) if self.pick_answers else None

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def open_external(self, url: str) -> None:
        self.opened.append(url)


class FakeGit:
    """Records git calls instead of running them."""

    def __init__(self, cwd: Path, remotes: Sequence[GitRemote] = (), revision: Optional[str] = "abc123"):
        self.cwd = cwd
        self.remotes = list(remotes)
        self.revision = revision
        self.calls: list[tuple] = []

    async def current_revision(self) -> Optional[str]:
        return self.revision

    async def checkout_local_branch(self, branch_name: str) -> None:
        self.calls.append(("checkout", branch_name))

    async def add(self, paths) -> None:
        self.calls.append(("add", [str(path) for path in paths]))

    async def commit(self, message: str) -> None:
        self.calls.append(("commit", message))

    async def push(self, remote: str, branch_name: str) -> None:
        self.calls.append(("push", remote, branch_name))

    async def get_remotes(self) -> list[GitRemote]:
        return list(self.remotes)


def git_factory_for(fake: FakeGit) -> Callable[[Path], FakeGit]:
    def factory(cwd: Path) -> FakeGit:
        fake.cwd = cwd
        return fake

    return factory


class FakeGitHub:
    """MockTransport handler serving the two endpoints the flow uses."""

    def __init__(self, default_branch: str = "main", pr_url: str = "https://github.com/acme/flags/pull/7"):
        self.default_branch = default_branch
        self.pr_url = pr_url
        self.requests: list[httpx.Request] = []
        self.pull_bodies: list[dict] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")
        if request.method == "GET" and len(parts) == 3 and parts[0] == "repos":
            return httpx.Response(200, json={"full_name": f"{parts[1]}/{parts[2]}", "default_branch": self.default_branch})
        if request.method == "POST" and parts[-1] == "pulls":
            self.pull_bodies.append(json.loads(request.content))
            return httpx.Response(201, json={"number": 7, "html_url": self.pr_url})
        return httpx.Response(404, json={"message": "Not Found"})

    def client_factory(self) -> Callable[[str], GitHubClient]:
        transport = httpx.MockTransport(self.handler)
        return lambda token: GitHubClient(token, transport=transport)
