from __future__ import annotations


class FlagPrError(Exception):
    """Base class for errors raised by flagpr itself."""


class DocumentError(FlagPrError):
    """A structured config document that cannot take a dotted-key edit."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class GitCommandError(FlagPrError):
    """A git subprocess exited non-zero."""

    def __init__(self, args: list[str], returncode: int, stderr: str) -> None:
        command = " ".join(["git", *args])
        detail = stderr.strip() or "no output"
        super().__init__(f"`{command}` failed with exit code {returncode}: {detail}")
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr
