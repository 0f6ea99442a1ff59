from __future__ import annotations
from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

# Parsed JSON/YAML tree. Only mappings are walked by the mutator.
DocValue = Union[None, bool, int, float, str, dict[str, "DocValue"], list["DocValue"]]
FlagValue = Union[bool, int, float, str]

ProposalStatus = Literal["created", "no_repo", "no_credential", "no_remote", "unresolved_remote"]
CommandStatus = Literal[
    "cancelled",
    "parse_failure",
    "no_candidates",
    "created",
    "no_repo",
    "no_credential",
    "no_remote",
    "unresolved_remote",
    "error",
]


class EditIntent(BaseModel):
    """Structured edit parsed from an operator sentence."""
    model_config = ConfigDict(frozen=True)

    flag_path: str = Field(pattern=r"^[^.]+(\.[^.]+)*$")
    value: FlagValue
    environment: Optional[str] = None
    region: Optional[str] = None

    @property
    def segments(self) -> list[str]:
        return self.flag_path.split(".")


class BranchState(BaseModel):
    name: str
    created_from_revision: Optional[str] = None


class RemoteRepoRef(BaseModel):
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class PullRequestRequest(BaseModel):
    """Payload for the forge's create-pull-request call."""
    owner: str
    repo: str
    title: str
    head: str
    base: str
    body: str


class ProposalOutcome(BaseModel):
    """Where the change-proposal flow stopped, and what it left behind."""
    status: ProposalStatus
    branch: Optional[str] = None
    pr_url: Optional[str] = None


class CommandResult(BaseModel):
    status: CommandStatus
    file_path: Optional[str] = None
    branch: Optional[str] = None
    pr_url: Optional[str] = None
    message: Optional[str] = None
