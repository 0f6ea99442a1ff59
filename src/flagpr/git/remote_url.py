from __future__ import annotations

import re
from typing import Optional

from flagpr.core.types import RemoteRepoRef


# git@github.com:owner/repo.git (suffix optional)
SSH_REMOTE_RE = re.compile(r"^git@(?P<host>[^:/]+):(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$")
# https://github.com/owner/repo.git (suffix optional, http accepted)
HTTPS_REMOTE_RE = re.compile(r"^https?://(?P<host>[^/]+)/(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$")


def parse_remote_url(remote_url: str) -> Optional[RemoteRepoRef]:
    """
    Extract owner/repo from an SSH or HTTPS remote URL.

    Returns None unless both parts are non-empty.
    """
    url = remote_url.strip()
    for pattern in (SSH_REMOTE_RE, HTTPS_REMOTE_RE):
        match = pattern.match(url)
        if match and match.group("owner") and match.group("repo"):
            return RemoteRepoRef(owner=match.group("owner"), repo=match.group("repo"))
    return None
