import logging
import sys

from dotenv import load_dotenv

from application.commit_flow import (
    STATUS_COMMITTED,
    STATUS_NO_CHANGES,
    CommitFlowResult,
    run_commit_flow,
)
from infrastructure.actions import (
    ActionSettings,
    build_commit_flow_config,
    build_commit_flow_dependencies,
    build_github_client,
)
from infrastructure.actions import workflow_commands
from infrastructure.observability import (
    configure_logging,
    log_event,
    register_sensitive_values,
    safe_message,
    set_run_id,
)


logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def report_result(result: CommitFlowResult) -> int:
    if result.status == STATUS_NO_CHANGES:
        workflow_commands.notice(result.message)
        workflow_commands.set_output("status", result.status)
        return EXIT_SUCCESS

    if result.status == STATUS_COMMITTED:
        if not result.commit_oid:
            workflow_commands.error("Commit was not returned by the GitHub API")
            return EXIT_FAILURE
        workflow_commands.set_output("commit-sha", result.commit_oid)
        if result.commit_url:
            workflow_commands.set_output("commit-url", result.commit_url)
        workflow_commands.set_output("status", result.status)
        return EXIT_SUCCESS

    workflow_commands.error(result.message)
    return EXIT_FAILURE


def main() -> int:
    load_dotenv()
    configure_logging()
    log_event(logger, logging.INFO, "cli.workflow.start")
    try:
        settings = ActionSettings.from_env()
    except RuntimeError as error:
        error_message = safe_message(str(error))
        log_event(logger, logging.ERROR, "cli.workflow.failed", error=error_message)
        workflow_commands.error(error_message)
        return EXIT_FAILURE

    register_sensitive_values(settings.github_token)
    set_run_id(settings.run_id)

    with build_github_client(settings) as github_client:
        result = run_commit_flow(
            build_commit_flow_config(settings),
            build_commit_flow_dependencies(settings, github_client),
        )

    log_event(
        logger,
        logging.INFO,
        "cli.workflow.end",
        status=result.status,
        message=result.message,
        commit=result.commit_oid,
    )
    return report_result(result)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
