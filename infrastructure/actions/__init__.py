from infrastructure.actions.settings import ActionSettings
from infrastructure.actions.workflow_factory import (
    build_commit_flow_config,
    build_commit_flow_dependencies,
    build_github_client,
)

__all__ = [
    "ActionSettings",
    "build_commit_flow_config",
    "build_commit_flow_dependencies",
    "build_github_client",
]
