"""flagpr CLI - update a config flag from a sentence and open a pull request."""
import argparse
import asyncio
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from flagpr.core.config_models import load_settings
from flagpr.proposal.command import run_update_command
from flagpr.proposal.interaction import ConsoleInteraction
from flagpr.proposal.orchestrator import ChangeProposalOrchestrator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flagpr",
        description="Update a config flag from a sentence and open a pull request.",
    )
    parser.add_argument("--root", type=Path, default=None, help="Project root (default: current directory)")
    parser.add_argument("--prompt", default=None, help="Update sentence; asked interactively when omitted")
    parser.add_argument("--config", type=Path, default=None, help="Settings file (default: .flagpr.yml in the root)")
    parser.add_argument("--branch-prefix", default=None, help="Prefix for the generated branch name")
    parser.add_argument("--github-token", default=None, help="GitHub token (default: settings file, then GITHUB_TOKEN)")
    parser.add_argument("--no-browser", action="store_true", help="Do not offer to open the pull request")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    ui = ConsoleInteraction()

    root = (args.root or Path.cwd()).resolve()
    if not root.is_dir():
        ui.error(f"Project root {root} is not a directory. Pass --root or run inside a project.")
        return 1

    load_dotenv(root / ".env")

    settings = load_settings(root, args.config)
    overrides = {}
    if args.branch_prefix is not None:
        overrides["branch_prefix"] = args.branch_prefix
    if args.github_token is not None:
        overrides["github_token"] = args.github_token
    if overrides:
        settings = settings.model_validate({**settings.model_dump(), **overrides})

    environ = dict(os.environ)
    orchestrator = ChangeProposalOrchestrator(ui, settings, environ, offer_browser=not args.no_browser)
    result = asyncio.run(
        run_update_command(root, ui, settings, environ, prompt_text=args.prompt, orchestrator=orchestrator)
    )
    return 1 if result.status == "error" else 0


if __name__ == "__main__":
    sys.exit(main())
