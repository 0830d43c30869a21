from typing import Protocol

from domain.models import CommitRequest, CommitResult, RepositoryRef


class GitHubApi(Protocol):
    def get_repository(self, owner: str, repo: str, branch_name: str) -> RepositoryRef:
        """Fetch repository identity, default branch tip and (when named) the target branch tip."""

    def create_commit_on_branch(self, request: CommitRequest) -> CommitResult:
        """Create one commit on top of request.expected_head_oid; rejects if the branch moved."""
