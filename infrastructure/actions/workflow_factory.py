from application.commit_flow import CommitFlowConfig, CommitFlowDependencies
from application.ports import GitHubApi
from domain.models import CommitMessage
from infrastructure.actions import workflow_commands
from infrastructure.actions.settings import ActionSettings
from infrastructure.github import GitHubClient
from infrastructure.observability import (
    observe_change_set,
    observe_workflow_step,
)
from infrastructure.workspace import WorkspaceFileReader


def build_github_client(settings: ActionSettings) -> GitHubClient:
    return GitHubClient(
        token=settings.github_token,
        graphql_url=settings.graphql_url,
        timeout_seconds=settings.api_timeout_seconds,
    )


def build_commit_flow_config(settings: ActionSettings) -> CommitFlowConfig:
    return CommitFlowConfig(
        file_paths=settings.file_paths,
        repository_owner=settings.repository_owner,
        repository_name=settings.repository_name,
        branch_name=settings.branch_name,
        commit_message=CommitMessage.parse(settings.commit_message),
    )


def build_commit_flow_dependencies(settings: ActionSettings, github: GitHubApi) -> CommitFlowDependencies:
    return CommitFlowDependencies(
        github=github,
        workspace=WorkspaceFileReader(settings.workspace),
        observe_change_set=observe_change_set,
        observe_step=observe_workflow_step,
        group=workflow_commands.group,
    )
