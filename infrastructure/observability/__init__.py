from infrastructure.observability.context import set_run_id
from infrastructure.observability.logging_utils import (
    configure_logging,
    log_event,
    register_sensitive_values,
    safe_message,
)
from infrastructure.observability.workflow_observer import (
    observe_change_set,
    observe_workflow_step,
)

__all__ = [
    "configure_logging",
    "log_event",
    "register_sensitive_values",
    "safe_message",
    "set_run_id",
    "observe_change_set",
    "observe_workflow_step",
]
