from __future__ import annotations

import asyncio
import sys
import webbrowser
from typing import Optional, Protocol, Sequence


class UserInteraction(Protocol):
    """Everything the flow needs from the operator's front end."""

    async def ask_text(self, prompt: str, placeholder: str = "") -> Optional[str]:
        """Free-text answer, or None when the operator cancels."""
        ...

    async def pick(self, choices: Sequence[str], placeholder: str = "") -> Optional[str]:
        """One of `choices`, or None when the operator cancels."""
        ...

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def open_external(self, url: str) -> None: ...


class ConsoleInteraction:
    """UserInteraction on a terminal. An empty answer or EOF cancels."""

    async def ask_text(self, prompt: str, placeholder: str = "") -> Optional[str]:
        hint = f"\n  e.g. {placeholder}" if placeholder else ""
        answer = await asyncio.to_thread(_read_line, f"{prompt}{hint}\n> ")
        if answer is None or not answer.strip():
            return None
        return answer

    async def pick(self, choices: Sequence[str], placeholder: str = "") -> Optional[str]:
        if placeholder:
            print(placeholder)
        for index, choice in enumerate(choices, 1):
            print(f"  {index}. {choice}")

        while True:
            answer = await asyncio.to_thread(_read_line, f"Choose 1-{len(choices)} (empty to cancel): ")
            if answer is None or not answer.strip():
                return None
            answer = answer.strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1]
            if answer in choices:
                return answer
            print(f"Invalid choice: {answer}")

    def info(self, message: str) -> None:
        print(message)

    def warning(self, message: str) -> None:
        print(f"⚠️  {message}")

    def error(self, message: str) -> None:
        print(f"❌ {message}", file=sys.stderr)

    def open_external(self, url: str) -> None:
        webbrowser.open(url)


def _read_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None
