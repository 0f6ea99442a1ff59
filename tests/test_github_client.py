"""Tests for the GitHub REST calls, served by httpx.MockTransport."""

import asyncio
import json

import httpx
import pytest

from flagpr.core.types import PullRequestRequest
from flagpr.github.client.github_client import GitHubClient
from flagpr.github.client.repo_api import create_pull_request, fetch_default_branch


def test_fetch_default_branch_sends_token():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"default_branch": "develop"})

    gh = GitHubClient("secret", transport=httpx.MockTransport(handler))

    assert asyncio.run(fetch_default_branch("acme", "flags", gh)) == "develop"
    assert str(seen[0].url) == "https://api.github.com/repos/acme/flags"
    assert seen[0].headers["Authorization"] == "token secret"


def test_create_pull_request_posts_payload():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"number": 3, "html_url": "https://ghe.example.com/acme/flags/pull/3"})

    gh = GitHubClient("secret", api_url="https://ghe.example.com/api/v3/", transport=httpx.MockTransport(handler))
    request = PullRequestRequest(owner="acme", repo="flags", title="t", head="flag-update/x-1", base="main", body="b")

    pr = asyncio.run(create_pull_request(request, gh))

    assert pr["html_url"] == "https://ghe.example.com/acme/flags/pull/3"
    assert seen[0].method == "POST"
    assert str(seen[0].url) == "https://ghe.example.com/api/v3/repos/acme/flags/pulls"
    assert json.loads(seen[0].content) == {"title": "t", "head": "flag-update/x-1", "base": "main", "body": "b"}


def test_http_errors_propagate():
    gh = GitHubClient("secret", transport=httpx.MockTransport(lambda request: httpx.Response(404, json={})))

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(fetch_default_branch("acme", "missing", gh))
