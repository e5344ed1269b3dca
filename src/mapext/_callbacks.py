"""
Invocation of user callbacks (resolver, predicate, on_missing).

Callbacks are called directly; anything they raise propagates unchanged.
When logging.trace_callbacks is enabled, each call is logged at debug.
"""

from __future__ import annotations

import inspect as _inspect
import logging as _logging
import typing as _typing

import mapext.config as config

_logger = _logging.getLogger(__name__)


def invoke(
    kind: str,
    callback: _typing.Callable[..., _typing.Any],
    *args: _typing.Any,
) -> _typing.Any:
    """
    Call a user callback, tracing the call if configured.

    Args:
        kind: Callback role for the log line ("resolver", "predicate", ...).
        callback: The callable to invoke.
        *args: Positional arguments passed through.

    Returns:
        Whatever the callback returns.
    """
    result = callback(*args)
    if config.get_settings().logging.trace_callbacks:
        _logger.debug("%s%r -> %r", kind, args, result)
    return result


def accepts_positional(callback: _typing.Callable[..., _typing.Any]) -> bool:
    """
    Check if a callback can take one positional argument.

    Callables whose signature can't be inspected (some builtins) are
    assumed to take one.
    """
    try:
        signature = _inspect.signature(callback)
    except (TypeError, ValueError):
        return True

    for param in signature.parameters.values():
        if param.kind in (
            _inspect.Parameter.POSITIONAL_ONLY,
            _inspect.Parameter.POSITIONAL_OR_KEYWORD,
            _inspect.Parameter.VAR_POSITIONAL,
        ):
            return True
    return False
