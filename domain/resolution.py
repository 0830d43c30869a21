from domain.errors import (
    StepResult,
    branch_not_found,
    err,
    ok,
    parent_commit_unresolvable,
)
from domain.models import BranchRef, ParentCommit, RepositoryRef


def select_target_ref(repository: RepositoryRef, branch_name: str) -> StepResult[BranchRef | None]:
    # A requested branch must exist; it is never silently replaced by the default branch.
    if branch_name and repository.ref is None:
        return err(branch_not_found(branch_name))
    return ok(repository.ref or repository.default_branch_ref)


def resolve_parent_commit(target_ref: BranchRef | None, branch_name: str) -> StepResult[ParentCommit]:
    # Only the tip (history[0]) is a valid parent: it is also the optimistic-concurrency guard.
    tip = target_ref.history[0] if target_ref and target_ref.history else None
    if tip is None or not tip.is_commit:
        return err(parent_commit_unresolvable(target_ref.name if target_ref else branch_name))
    return ok(ParentCommit(oid=tip.oid))
