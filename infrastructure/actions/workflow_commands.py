import logging
import os
import sys
import time
import uuid
from contextlib import contextmanager
from typing import Iterator

from infrastructure.observability import log_event, safe_message


logger = logging.getLogger(__name__)


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue_command(command: str, message: str = "") -> None:
    sys.stdout.write(f"::{command}::{_escape_data(safe_message(message))}\n")
    sys.stdout.flush()


def debug(message: str) -> None:
    issue_command("debug", message)


def notice(message: str) -> None:
    issue_command("notice", message)


def error(message: str) -> None:
    issue_command("error", message)


@contextmanager
def group(title: str) -> Iterator[None]:
    issue_command("group", title)
    start_time = time.monotonic()
    try:
        yield
    finally:
        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        debug(f"time taken: {elapsed_ms} ms")
        log_event(logger, logging.DEBUG, "actions.group.completed", title=title, time_taken_ms=elapsed_ms)
        issue_command("endgroup")


def set_output(name: str, value: str) -> None:
    output_path = os.getenv("GITHUB_OUTPUT")
    log_event(logger, logging.INFO, "actions.output.set", name=name, value=value)
    if not output_path:
        return
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with open(output_path, "a", encoding="utf-8") as output_file:
        output_file.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
