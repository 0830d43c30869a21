import base64
from typing import Any

from domain.errors import RemoteCallError
from domain.models import BranchRef, CommitRequest, CommitResult, HistoryNode, RepositoryRef


def qualified_branch_name(branch_name: str) -> str:
    return f"refs/heads/{branch_name}"


def to_repository_variables(owner: str, repo: str, branch_name: str) -> dict[str, Any]:
    return {
        "owner": owner,
        "repo": repo,
        "qualifiedName": qualified_branch_name(branch_name) if branch_name else "",
        "includeRef": bool(branch_name),
    }


def _to_branch_ref(payload: dict[str, Any] | None) -> BranchRef | None:
    if not payload:
        return None
    # target is an empty object when the ref does not point at a commit.
    history = (payload.get("target") or {}).get("history") or {}
    nodes = tuple(
        HistoryNode(typename=node.get("__typename", ""), oid=node.get("oid"))
        for node in history.get("nodes") or []
        if node
    )
    return BranchRef(name=payload.get("name", ""), history=nodes)


def to_repository_ref(data: dict[str, Any]) -> RepositoryRef:
    repository = data.get("repository")
    if not repository:
        raise RemoteCallError("GitHub GraphQL response did not include the repository")
    return RepositoryRef(
        name_with_owner=repository["nameWithOwner"],
        default_branch_ref=_to_branch_ref(repository.get("defaultBranchRef")),
        ref=_to_branch_ref(repository.get("ref")),
    )


def to_commit_variables(request: CommitRequest) -> dict[str, Any]:
    change_set = request.change_set
    return {
        "input": {
            "branch": {
                "repositoryNameWithOwner": request.repository_name_with_owner,
                "branchName": request.branch_name,
            },
            "expectedHeadOid": request.expected_head_oid,
            "message": {
                "headline": request.message.headline,
                "body": request.message.body,
            },
            "fileChanges": {
                "additions": [
                    {
                        "path": addition.path,
                        "contents": base64.b64encode(addition.contents).decode("ascii"),
                    }
                    for addition in change_set.additions
                ],
                "deletions": [{"path": deletion.path} for deletion in change_set.deletions],
            },
        }
    }


def to_commit_result(data: dict[str, Any]) -> CommitResult:
    commit = (data.get("createCommitOnBranch") or {}).get("commit") or {}
    return CommitResult(oid=commit.get("oid"), url=commit.get("url"))
