import logging

from domain.models import ChangeSet
from infrastructure.observability.logging_utils import log_event


logger = logging.getLogger(__name__)


def observe_change_set(change_set: ChangeSet) -> None:
    log_event(
        logger,
        logging.INFO,
        "workflow.change_set.built",
        files_count=change_set.file_count,
        additions_count=len(change_set.additions),
        deletions_count=len(change_set.deletions),
        additions_bytes=sum(len(addition.contents) for addition in change_set.additions),
    )
    for addition in change_set.additions:
        log_event(logger, logging.DEBUG, "workflow.change_set.addition", path=addition.path)
    for deletion in change_set.deletions:
        log_event(logger, logging.DEBUG, "workflow.change_set.deletion", path=deletion.path)


def observe_workflow_step(step: str, status: str, detail: str | None = None) -> None:
    level = logging.ERROR if status == "error" else logging.INFO
    log_event(
        logger,
        level,
        "workflow.step",
        step=step,
        status=status,
        detail=detail,
    )
