from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from flagpr.core.errors import GitCommandError


@dataclass(frozen=True)
class GitRemote:
    name: str
    fetch_url: Optional[str] = None
    push_url: Optional[str] = None


def parse_remote_listing(output: str) -> list[GitRemote]:
    """
    Parse `git remote -v` output into one GitRemote per name.

    Lines look like: origin  git@github.com:owner/repo.git (fetch)
    """
    fetch_urls: dict[str, str] = {}
    push_urls: dict[str, str] = {}
    order: list[str] = []

    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 2:
            continue
        name, url = parts[0], parts[1]
        kind = parts[2] if len(parts) > 2 else "(fetch)"
        if name not in order:
            order.append(name)
        if kind == "(push)":
            push_urls.setdefault(name, url)
        else:
            fetch_urls.setdefault(name, url)

    return [GitRemote(name=name, fetch_url=fetch_urls.get(name), push_url=push_urls.get(name)) for name in order]


@dataclass(frozen=True)
class GitClient:
    """Thin async wrapper over the git binary, bound to one working tree."""
    cwd: Path
    git_binary: str = "git"

    async def run(self, args: Sequence[str]) -> str:
        """Run `git <args>` in cwd and return stdout. Raises GitCommandError on failure."""
        print(f"[FlagPR] 🔧 git {' '.join(args)}")
        process = await asyncio.create_subprocess_exec(
            self.git_binary,
            *args,
            cwd=str(self.cwd),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
        if process.returncode != 0:
            raise GitCommandError(list(args), process.returncode, stderr.decode("utf-8", errors="replace"))
        return stdout.decode("utf-8", errors="replace")

    async def current_revision(self) -> Optional[str]:
        """HEAD commit SHA, or None on an unborn branch."""
        try:
            return (await self.run(["rev-parse", "--verify", "HEAD"])).strip() or None
        except GitCommandError:
            return None

    async def checkout_local_branch(self, branch_name: str) -> None:
        await self.run(["checkout", "-b", branch_name])

    async def add(self, paths: Sequence[Path | str]) -> None:
        await self.run(["add", "--", *[str(path) for path in paths]])

    async def commit(self, message: str) -> None:
        await self.run(["commit", "-m", message])

    async def push(self, remote: str, branch_name: str) -> None:
        await self.run(["push", remote, branch_name])

    async def get_remotes(self) -> list[GitRemote]:
        return parse_remote_listing(await self.run(["remote", "-v"]))
