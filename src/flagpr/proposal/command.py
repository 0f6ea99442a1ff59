from __future__ import annotations

import traceback
from pathlib import Path
from typing import Mapping, Optional

from flagpr.core.config_models import FlagPrSettings
from flagpr.core.prompt_parser import PROMPT_EXAMPLE, parse_prompt
from flagpr.core.types import CommandResult
from flagpr.files.locator import find_candidate_files, relative_choices
from flagpr.files.patcher import update_file_flag
from flagpr.proposal.interaction import UserInteraction
from flagpr.proposal.orchestrator import ChangeProposalOrchestrator


PARSE_FAILURE_MESSAGE = (
    "Could not parse the prompt. Expected format: "
    "onUPDATE <flag> to <value> for <env> environment and <region> region"
)


async def run_update_command(
    root: Path,
    ui: UserInteraction,
    settings: FlagPrSettings,
    environ: Mapping[str, str],
    prompt_text: Optional[str] = None,
    orchestrator: Optional[ChangeProposalOrchestrator] = None,
) -> CommandResult:
    """
    Run the whole flow once: prompt, pick a file, patch it, propose the change.

    Any unexpected failure is reported to the operator as one short message
    and logged with its traceback. Nothing is rolled back.
    """
    try:
        return await _run(root, ui, settings, environ, prompt_text, orchestrator)
    except Exception as error:
        print(f"[FlagPR] ❌ ERROR: {error}")
        traceback.print_exc()
        ui.error(f"Error: {error}")
        return CommandResult(status="error", message=str(error))


async def _run(
    root: Path,
    ui: UserInteraction,
    settings: FlagPrSettings,
    environ: Mapping[str, str],
    prompt_text: Optional[str],
    orchestrator: Optional[ChangeProposalOrchestrator],
) -> CommandResult:
    root = Path(root).resolve()
    print(f"[FlagPR] 📂 Using root for operations: {root}")

    if prompt_text is None:
        prompt_text = await ui.ask_text(
            'Enter update prompt (e.g. "onUPDATE volumeQuotaFlag to false for stage environment and delhi region")',
            placeholder=PROMPT_EXAMPLE,
        )
    if not prompt_text:
        ui.info("Cancelled.")
        return CommandResult(status="cancelled")

    intent = parse_prompt(prompt_text)
    if intent is None:
        ui.error(PARSE_FAILURE_MESSAGE)
        return CommandResult(status="parse_failure", message=PARSE_FAILURE_MESSAGE)
    print(f"[FlagPR] 🧩 Parsed intent: {intent.model_dump()}")

    candidates = find_candidate_files(root)
    print(f"[FlagPR] 🔎 Found {len(candidates)} candidate file(s)")
    if not candidates:
        message = "No candidate JSON/YAML config files found in workspace."
        ui.error(message)
        return CommandResult(status="no_candidates", message=message)

    choices = relative_choices(root, candidates)
    picked = await ui.pick(choices, placeholder="Pick file to update")
    if picked is None:
        ui.info("Cancelled.")
        return CommandResult(status="cancelled")
    file_path = candidates[choices.index(picked)]

    update_file_flag(file_path, intent)

    orchestrator = orchestrator or ChangeProposalOrchestrator(ui, settings, environ)
    outcome = await orchestrator.propose(root, Path(file_path), intent, prompt_text)

    return CommandResult(
        status=outcome.status,
        file_path=file_path,
        branch=outcome.branch,
        pr_url=outcome.pr_url,
    )
