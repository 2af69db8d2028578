from .condition import CONTINUE, ERROR, WARNING, WILDCARD, Condition, Handler, Restart
from .errors import cerror, error, ignore_errors, warn
from .restart import RestartAction, find_restart, invoke_restart, list_restarts, with_restart
from .signal import ConditionLike, HandlerAction, handle, handle_bind, resignal, signal

__all__ = (
    # Records
    "CONTINUE",
    "ERROR",
    "WARNING",
    "WILDCARD",
    "Condition",
    "ConditionLike",
    "Handler",
    "HandlerAction",
    "Restart",
    "RestartAction",
    # Signal / handle
    "handle",
    "handle_bind",
    "resignal",
    "signal",
    # Restarts
    "find_restart",
    "invoke_restart",
    "list_restarts",
    "with_restart",
    # Errors
    "cerror",
    "error",
    "ignore_errors",
    "warn",
)
