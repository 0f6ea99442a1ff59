"""
Turn an edited config file into a pushed branch and a pull request.

LocateRepoRoot -> CreateBranch -> StageAndCommit -> Push -> ResolveCredential
-> ResolveRemote -> CreatePullRequest -> Done

Missing prerequisites end the flow early with a warning or error for the
operator instead of an exception: no_repo, no_credential, no_remote,
unresolved_remote. Whatever already happened (edit, commit, push) stays.
"""
from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Mapping, Optional

from flagpr.core.config_models import FlagPrSettings, resolve_credential
from flagpr.core.prompt_parser import format_value
from flagpr.core.types import BranchState, EditIntent, ProposalOutcome, PullRequestRequest
from flagpr.git.client import GitClient
from flagpr.git.remote_url import parse_remote_url
from flagpr.git.repository import find_repo_root
from flagpr.github.client.github_client import GitHubClient
from flagpr.github.client.repo_api import create_pull_request, fetch_default_branch
from flagpr.proposal.interaction import UserInteraction


ORIGIN = "origin"
OPEN_CHOICE = "Open in browser"
DISMISS_CHOICE = "Dismiss"


def current_millis() -> int:
    return time.time_ns() // 1_000_000


def make_branch_name(prefix: str, intent: EditIntent, timestamp_ms: int) -> str:
    return f"{prefix}/{intent.flag_path}-{timestamp_ms}"


def make_commit_message(intent: EditIntent) -> str:
    return f"Update {intent.flag_path} to {format_value(intent.value)}"


def make_pr_title(intent: EditIntent) -> str:
    environment = intent.environment or ""
    region = intent.region or ""
    return f"Update {intent.flag_path} -> {format_value(intent.value)} ({environment} {region})"


def make_pr_body(prompt_text: str) -> str:
    return f"Automated update by flagpr.\n\nPrompt: {prompt_text}"


class ChangeProposalOrchestrator:
    def __init__(
        self,
        ui: UserInteraction,
        settings: FlagPrSettings,
        environ: Mapping[str, str],
        git_factory: Callable[[Path], GitClient] = GitClient,
        gh_factory: Optional[Callable[[str], GitHubClient]] = None,
        clock: Callable[[], int] = current_millis,
        offer_browser: bool = True,
    ) -> None:
        self.ui = ui
        self.settings = settings
        self.environ = environ
        self.git_factory = git_factory
        self.gh_factory = gh_factory or (lambda token: GitHubClient(token, api_url=settings.github_api_url))
        self.clock = clock
        self.offer_browser = offer_browser

    async def propose(self, working_root: Path, file_path: Path, intent: EditIntent, prompt_text: str) -> ProposalOutcome:
        """
        Run the git and forge phases for one edited file.

        Git and forge failures raise; the caller reports them.
        """
        repo_root = find_repo_root(working_root)
        if repo_root is None:
            print(f"[FlagPR] ⛔ No git repository at or above {working_root}")
            self.ui.error(f"No git repository found at or above {working_root}. The file was updated but not committed.")
            return ProposalOutcome(status="no_repo")

        git = self.git_factory(repo_root)

        branch = BranchState(
            name=make_branch_name(self.settings.branch_prefix, intent, self.clock()),
            created_from_revision=await git.current_revision(),
        )
        await git.checkout_local_branch(branch.name)
        await git.add([file_path])
        await git.commit(make_commit_message(intent))
        await git.push(ORIGIN, branch.name)
        print(f"[FlagPR] 🚀 Pushed {branch.name} (from {branch.created_from_revision or 'unborn HEAD'})")

        token = resolve_credential(self.settings, self.environ)
        if not token:
            print("[FlagPR] ⛔ No forge token, stopping after push")
            self.ui.warning(
                "No GitHub token found. Set github_token in .flagpr.yml or the GITHUB_TOKEN "
                "environment variable to create a PR. Branch was pushed."
            )
            return ProposalOutcome(status="no_credential", branch=branch.name)

        remotes = await git.get_remotes()
        origin = next((remote for remote in remotes if remote.name == ORIGIN), None)
        if origin is None or not origin.fetch_url:
            print("[FlagPR] ⛔ No origin remote")
            self.ui.error("No origin remote found.")
            return ProposalOutcome(status="no_remote", branch=branch.name)

        remote_ref = parse_remote_url(origin.fetch_url)
        if remote_ref is None:
            print(f"[FlagPR] ⛔ Could not parse owner/repo from {origin.fetch_url}")
            self.ui.error(f"Could not parse GitHub repo from remote URL: {origin.fetch_url}")
            return ProposalOutcome(status="unresolved_remote", branch=branch.name)

        gh = self.gh_factory(token)
        default_branch = await fetch_default_branch(remote_ref.owner, remote_ref.repo, gh)
        print(f"[FlagPR] 🔎 {remote_ref.full_name} default branch: {default_branch}")

        request = PullRequestRequest(
            owner=remote_ref.owner,
            repo=remote_ref.repo,
            title=make_pr_title(intent),
            head=branch.name,
            base=default_branch,
            body=make_pr_body(prompt_text),
        )
        pr = await create_pull_request(request, gh)
        pr_url = pr.get("html_url") or pr.get("url") or ""
        print(f"[FlagPR] ✅ Created pull request: {pr_url}")

        self.ui.info(f"PR created: {pr_url}")
        if self.offer_browser and pr_url:
            choice = await self.ui.pick([OPEN_CHOICE, DISMISS_CHOICE], placeholder="Open the pull request?")
            if choice == OPEN_CHOICE:
                self.ui.open_external(pr_url)

        return ProposalOutcome(status="created", branch=branch.name, pr_url=pr_url)
