from contextvars import ContextVar, Token

# Correlates every log line of one action run (GITHUB_RUN_ID when available).
_run_id_ctx: ContextVar[str] = ContextVar("run_id", default="-")


def set_run_id(run_id: str) -> Token[str]:
    return _run_id_ctx.set(run_id)


def get_run_id() -> str:
    return _run_id_ctx.get()
