from __future__ import annotations

from flagpr.core.types import PullRequestRequest
from flagpr.github.client.github_client import GitHubClient


async def fetch_repo(owner: str, repo: str, gh: GitHubClient) -> dict:
    return await gh.get_json(gh.url(f"repos/{owner}/{repo}"))


async def fetch_default_branch(owner: str, repo: str, gh: GitHubClient) -> str:
    repo_data = await fetch_repo(owner, repo, gh)
    return repo_data["default_branch"]


async def create_pull_request(request: PullRequestRequest, gh: GitHubClient) -> dict:
    """Open a pull request. The response carries `html_url` and `number`."""
    url = gh.url(f"repos/{request.owner}/{request.repo}/pulls")
    body = request.model_dump(include={"title", "head", "base", "body"})
    return await gh.post_json(url, body)
