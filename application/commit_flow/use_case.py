from domain.errors import CommitError, ErrorKind

from application.commit_flow.contracts import (
    STATUS_FAILED,
    CommitFlowConfig,
    CommitFlowDependencies,
    CommitFlowResult,
)
from application.commit_flow.steps import (
    build_error_result,
    build_success_result,
    collect_change_set,
    fetch_repository,
    issue_commit,
    resolve_parent,
    resolve_target_ref,
    validate_inputs,
)


def _finish_with_error(
    step: str,
    error: CommitError,
    dependencies: CommitFlowDependencies,
    *,
    branch: str | None = None,
) -> CommitFlowResult:
    if error.kind is ErrorKind.NO_FILE_CHANGES:
        dependencies.observe_step(step, "success", detail="no changes")
        dependencies.observe_step("finalize", "success", detail=error.message)
    else:
        dependencies.observe_step(step, "error", detail=error.message)
    return build_error_result(error, branch=branch)


def run_commit_flow(
    config: CommitFlowConfig,
    dependencies: CommitFlowDependencies,
    *,
    raise_on_error: bool = False,
) -> CommitFlowResult:
    try:
        dependencies.observe_step("validate_inputs", "start")
        inputs = validate_inputs(config)
        if inputs.failed:
            return _finish_with_error("validate_inputs", inputs.error, dependencies)
        dependencies.observe_step(
            "validate_inputs",
            "success",
            detail=f"paths_count={len(inputs.value)}",
        )

        dependencies.observe_step("build_change_set", "start")
        change_set = collect_change_set(config, dependencies)
        if change_set.failed:
            return _finish_with_error("build_change_set", change_set.error, dependencies)
        dependencies.observe_step(
            "build_change_set",
            "success",
            detail=f"files_count={change_set.value.file_count}",
        )

        dependencies.observe_step("resolve_repository", "start")
        repository = fetch_repository(config, dependencies)
        if repository.failed:
            return _finish_with_error("resolve_repository", repository.error, dependencies)
        dependencies.observe_step(
            "resolve_repository",
            "success",
            detail=repository.value.name_with_owner,
        )

        dependencies.observe_step("validate_branch", "start")
        target_ref = resolve_target_ref(config, repository.value)
        if target_ref.failed:
            return _finish_with_error(
                "validate_branch",
                target_ref.error,
                dependencies,
                branch=config.branch_name or None,
            )
        dependencies.observe_step(
            "validate_branch",
            "success",
            detail=target_ref.value.name if target_ref.value else None,
        )

        dependencies.observe_step("resolve_parent", "start")
        parent_commit = resolve_parent(config, target_ref.value)
        if parent_commit.failed:
            return _finish_with_error(
                "resolve_parent",
                parent_commit.error,
                dependencies,
                branch=target_ref.value.name if target_ref.value else config.branch_name or None,
            )
        dependencies.observe_step("resolve_parent", "success", detail=parent_commit.value.oid)

        dependencies.observe_step("commit", "start")
        commit_result = issue_commit(
            config,
            dependencies,
            repository.value,
            target_ref.value,
            parent_commit.value,
            change_set.value,
        )
        if commit_result.failed:
            return _finish_with_error(
                "commit",
                commit_result.error,
                dependencies,
                branch=target_ref.value.name,
            )
        dependencies.observe_step("commit", "success", detail=commit_result.value.oid)

        result = build_success_result(target_ref.value, commit_result.value)
        dependencies.observe_step("finalize", "success", detail=result.message)
        return result
    except Exception as error:
        dependencies.observe_step("finalize", "error", detail=str(error))
        if raise_on_error:
            raise
        return CommitFlowResult(
            status=STATUS_FAILED,
            message=str(error) or "Commit flow execution failed",
        )
