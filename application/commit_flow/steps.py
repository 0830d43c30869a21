from domain.errors import (
    CommitError,
    ErrorKind,
    RemoteCallError,
    StepResult,
    err,
    files_required,
    no_file_changes,
    ok,
    remote_call_failure,
)
from domain.models import BranchRef, ChangeSet, CommitRequest, CommitResult, ParentCommit, RepositoryRef
from domain.resolution import resolve_parent_commit, select_target_ref

from application.commit_flow.change_set_builder import build_change_set
from application.commit_flow.contracts import (
    STATUS_COMMITTED,
    STATUS_FAILED,
    STATUS_NO_CHANGES,
    CommitFlowConfig,
    CommitFlowDependencies,
    CommitFlowResult,
)


def validate_inputs(config: CommitFlowConfig) -> StepResult[tuple[str, ...]]:
    # Nothing touches the filesystem or the API without at least one path.
    if not config.file_paths:
        return err(files_required())
    return ok(config.file_paths)


def collect_change_set(
    config: CommitFlowConfig,
    dependencies: CommitFlowDependencies,
) -> StepResult[ChangeSet]:
    result = build_change_set(config.file_paths, dependencies.workspace)
    if result.failed:
        return result
    dependencies.observe_change_set(result.value)
    # An empty change set is the single designed no-op exit.
    if result.value.is_empty:
        return err(no_file_changes())
    return result


def fetch_repository(
    config: CommitFlowConfig,
    dependencies: CommitFlowDependencies,
) -> StepResult[RepositoryRef]:
    title = (
        f"fetching repository info for owner: {config.repository_owner}, "
        f"repo: {config.repository_name}, branch: {config.branch_name}"
    )
    with dependencies.group(title):
        try:
            repository = dependencies.github.get_repository(
                config.repository_owner,
                config.repository_name,
                config.branch_name,
            )
        except RemoteCallError as error:
            return err(remote_call_failure(str(error)))
    return ok(repository)


def resolve_target_ref(
    config: CommitFlowConfig,
    repository: RepositoryRef,
) -> StepResult[BranchRef | None]:
    return select_target_ref(repository, config.branch_name)


def resolve_parent(
    config: CommitFlowConfig,
    target_ref: BranchRef | None,
) -> StepResult[ParentCommit]:
    return resolve_parent_commit(target_ref, config.branch_name)


def issue_commit(
    config: CommitFlowConfig,
    dependencies: CommitFlowDependencies,
    repository: RepositoryRef,
    target_ref: BranchRef,
    parent_commit: ParentCommit,
    change_set: ChangeSet,
) -> StepResult[CommitResult]:
    # Commits land on the resolved target, so an omitted branch name means the default branch.
    request = CommitRequest(
        repository_name_with_owner=repository.name_with_owner,
        branch_name=target_ref.name,
        expected_head_oid=parent_commit.oid,
        change_set=change_set,
        message=config.commit_message,
    )
    with dependencies.group("committing files"):
        try:
            commit_result = dependencies.github.create_commit_on_branch(request)
        except RemoteCallError as error:
            return err(remote_call_failure(str(error)))
    return ok(commit_result)


def build_error_result(error: CommitError, *, branch: str | None = None) -> CommitFlowResult:
    # No-op is reported as a benign outcome; every other kind fails the run.
    if error.kind is ErrorKind.NO_FILE_CHANGES:
        return CommitFlowResult(status=STATUS_NO_CHANGES, message=error.message, branch=branch)
    return CommitFlowResult(
        status=STATUS_FAILED,
        message=error.message,
        branch=branch,
        error_kind=error.kind,
    )


def build_success_result(target_ref: BranchRef, commit_result: CommitResult) -> CommitFlowResult:
    return CommitFlowResult(
        status=STATUS_COMMITTED,
        message=f"Committed to branch: {target_ref.name}",
        branch=target_ref.name,
        commit_oid=commit_result.oid,
        commit_url=commit_result.url,
    )
