import logging
from typing import Any

import requests

from domain.errors import RemoteCallError
from domain.models import CommitRequest, CommitResult, RepositoryRef
from infrastructure.github.mappers import (
    to_commit_result,
    to_commit_variables,
    to_repository_ref,
    to_repository_variables,
)
from infrastructure.github.queries import CREATE_COMMIT_ON_BRANCH_MUTATION, GET_REPOSITORY_QUERY
from infrastructure.observability import log_event, safe_message


logger = logging.getLogger(__name__)

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_TIMEOUT_SECONDS = 30.0


class GitHubClient:
    def __init__(
        self,
        *,
        token: str,
        graphql_url: str = DEFAULT_GRAPHQL_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.token = token
        self.graphql_url = graphql_url
        self.timeout_seconds = timeout_seconds
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def execute(self, operation: str, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        try:
            response = self.session.post(
                self.graphql_url,
                json={"query": query, "variables": variables},
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as error:
            details = safe_message(str(error))
            log_event(logger, logging.ERROR, "github.graphql.transport_failed", operation=operation, details=details)
            raise RemoteCallError(f"GitHub {operation} request failed: {details}") from error

        if response.status_code >= 400:
            error_details = response.text
            try:
                error_payload = response.json()
                if isinstance(error_payload, dict) and error_payload.get("message"):
                    error_details = str(error_payload["message"])
            except ValueError:
                pass
            safe_error_details = safe_message(error_details)
            log_event(
                logger,
                logging.ERROR,
                "github.graphql.http_failed",
                operation=operation,
                status_code=response.status_code,
                details=safe_error_details,
            )
            raise RemoteCallError(
                f"GitHub {operation} failed ({response.status_code}): {safe_error_details}"
            )

        try:
            payload = response.json()
        except ValueError as error:
            raise RemoteCallError(f"GitHub {operation} returned a non-JSON response") from error
        if not isinstance(payload, dict):
            raise RemoteCallError(f"GitHub {operation} returned a non-object JSON response")

        graphql_errors = payload.get("errors") or []
        if not isinstance(graphql_errors, list):
            graphql_errors = [graphql_errors]
        if graphql_errors:
            messages = "; ".join(
                str(graphql_error.get("message", graphql_error))
                if isinstance(graphql_error, dict)
                else str(graphql_error)
                for graphql_error in graphql_errors
            )
            safe_error_details = safe_message(messages)
            log_event(
                logger,
                logging.ERROR,
                "github.graphql.errors",
                operation=operation,
                details=safe_error_details,
            )
            raise RemoteCallError(safe_error_details)

        data = payload.get("data") or {}
        if not isinstance(data, dict):
            raise RemoteCallError(f"GitHub {operation} returned malformed data")
        return data

    def get_repository(self, owner: str, repo: str, branch_name: str) -> RepositoryRef:
        log_event(
            logger,
            logging.INFO,
            "github.repository.get",
            owner=owner,
            repo=repo,
            branch=branch_name or None,
        )
        data = self.execute(
            "repository query",
            GET_REPOSITORY_QUERY,
            to_repository_variables(owner, repo, branch_name),
        )
        return to_repository_ref(data)

    def create_commit_on_branch(self, request: CommitRequest) -> CommitResult:
        log_event(
            logger,
            logging.INFO,
            "github.commit.create",
            repository=request.repository_name_with_owner,
            branch=request.branch_name,
            expected_head_oid=request.expected_head_oid,
            additions_count=len(request.change_set.additions),
            deletions_count=len(request.change_set.deletions),
        )
        data = self.execute(
            "createCommitOnBranch mutation",
            CREATE_COMMIT_ON_BRANCH_MUTATION,
            to_commit_variables(request),
        )
        return to_commit_result(data)
