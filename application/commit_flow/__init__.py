from application.commit_flow.change_set_builder import build_change_set
from application.commit_flow.contracts import (
    DEFAULT_COMMIT_MESSAGE,
    STATUS_COMMITTED,
    STATUS_FAILED,
    STATUS_NO_CHANGES,
    CommitFlowConfig,
    CommitFlowDependencies,
    CommitFlowResult,
)
from application.commit_flow.use_case import run_commit_flow

__all__ = [
    "DEFAULT_COMMIT_MESSAGE",
    "STATUS_COMMITTED",
    "STATUS_FAILED",
    "STATUS_NO_CHANGES",
    "CommitFlowConfig",
    "CommitFlowDependencies",
    "CommitFlowResult",
    "build_change_set",
    "run_commit_flow",
]
