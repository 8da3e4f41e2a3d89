"""Operation context binding for structured logging.

Binds a correlation id (and optional operation metadata) to every log entry
emitted while a directory operation runs, so the page fetches of one
membership check can be told apart from another's.

Usage:
    from infrastructure.logging import bind_operation_context

    with bind_operation_context(operation="is_member", provider="graph"):
        logger.info("checking_membership")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_operation_context(
    correlation_id: Optional[str] = None,
    operation: Optional[str] = None,
    provider: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind operation-scoped context to all logs within the block.

    Args:
        correlation_id: Unique operation identifier. Auto-generated if not provided.
        operation: Operation name (e.g. "is_member", "add_user_to_group").
        provider: Directory provider name (e.g. "google", "graph").
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The correlation id in effect for the block.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if operation is not None:
        context["operation"] = operation

    if provider is not None:
        context["provider"] = provider

    context.update(extra_context)

    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["correlation_id"]
    finally:
        # Nested blocks hand back whatever the enclosing block had bound
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_operation_context() -> None:
    """Clear all operation-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
