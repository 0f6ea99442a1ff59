"""Tests for owner/repo extraction from remote URLs."""

import pytest

from flagpr.git.remote_url import parse_remote_url


@pytest.mark.parametrize(
    "url",
    [
        "git@github.com:acme/flags.git",
        "git@github.com:acme/flags",
        "https://github.com/acme/flags.git",
        "https://github.com/acme/flags",
        "http://github.example.com/acme/flags.git",
        "https://token@github.com/acme/flags.git\n",
    ],
)
def test_recognized_shapes(url):
    ref = parse_remote_url(url)

    assert ref is not None
    assert (ref.owner, ref.repo) == ("acme", "flags")
    assert ref.full_name == "acme/flags"


@pytest.mark.parametrize(
    "url",
    [
        "",
        "/srv/git/flags.git",
        "file:///srv/git/flags.git",
        "https://github.com/acme",
        "https://gitlab.com/group/sub/flags.git",
        "git@github.com:flags.git",
    ],
)
def test_unresolvable_shapes(url):
    assert parse_remote_url(url) is None
