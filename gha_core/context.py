"""Workflow run context read from the runner environment and event payload."""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Mapping, NamedTuple, Optional

from github import Auth, Github

from gha_core.config import DEFAULT_API_URL, DEFAULT_GRAPHQL_URL, DEFAULT_SERVER_URL
from gha_core.errors import MissingRepositoryContext


class RepoRef(NamedTuple):
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class IssueRef(NamedTuple):
    owner: str
    repo: str
    number: Optional[int]


def _int(value: Optional[str]) -> int:
    try:
        return int(value or 0)
    except ValueError:
        return 0


def load_payload(event_path: Optional[str]) -> Dict[str, Any]:
    if not event_path:
        return {}
    if not os.path.isfile(event_path):
        print(f"GITHUB_EVENT_PATH {event_path} does not exist", flush=True)
        return {}
    with open(event_path, encoding="utf-8") as f:
        return json.load(f)


class Context:
    """Snapshot of the ``GITHUB_*`` environment taken at construction time."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        env = os.environ if environ is None else environ
        self.payload: Dict[str, Any] = load_payload(env.get("GITHUB_EVENT_PATH"))
        self.event_name = env.get("GITHUB_EVENT_NAME", "")
        self.sha = env.get("GITHUB_SHA", "")
        self.ref = env.get("GITHUB_REF", "")
        self.workflow = env.get("GITHUB_WORKFLOW", "")
        self.action = env.get("GITHUB_ACTION", "")
        self.actor = env.get("GITHUB_ACTOR", "")
        self.job = env.get("GITHUB_JOB", "")
        self.run_attempt = _int(env.get("GITHUB_RUN_ATTEMPT"))
        self.run_number = _int(env.get("GITHUB_RUN_NUMBER"))
        self.run_id = _int(env.get("GITHUB_RUN_ID"))
        self.api_url = env.get("GITHUB_API_URL") or DEFAULT_API_URL
        self.server_url = env.get("GITHUB_SERVER_URL") or DEFAULT_SERVER_URL
        self.graphql_url = env.get("GITHUB_GRAPHQL_URL") or DEFAULT_GRAPHQL_URL
        self._repository = env.get("GITHUB_REPOSITORY", "")

    @property
    def repo(self) -> RepoRef:
        if self._repository and "/" in self._repository:
            owner, name = self._repository.split("/", 1)
            return RepoRef(owner, name)

        repository = self.payload.get("repository") or {}
        owner = (repository.get("owner") or {}).get("login")
        name = repository.get("name")
        if owner and name:
            return RepoRef(owner, name)
        raise MissingRepositoryContext()

    @property
    def issue(self) -> IssueRef:
        payload = self.payload
        number = (
            (payload.get("issue") or {}).get("number")
            or (payload.get("pull_request") or {}).get("number")
            or payload.get("number")
        )
        owner, repo = self.repo
        return IssueRef(owner, repo, number)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "event_name": self.event_name,
            "sha": self.sha,
            "ref": self.ref,
            "workflow": self.workflow,
            "action": self.action,
            "actor": self.actor,
            "job": self.job,
            "run_attempt": self.run_attempt,
            "run_number": self.run_number,
            "run_id": self.run_id,
            "api_url": self.api_url,
            "server_url": self.server_url,
            "graphql_url": self.graphql_url,
            "repository": self._repository,
        }

    def get_client(self, token: str) -> Github:
        """Return a PyGithub client pointed at this run's API endpoint."""
        return Github(auth=Auth.Token(token), base_url=self.api_url)
