"""LangFuse observability for Gemini calls."""

import logging
from functools import wraps
from typing import Any, Callable

from studyaid.config import settings

logger = logging.getLogger(__name__)

_langfuse = None


def get_langfuse():
    """Lazy-initialize LangFuse client."""
    global _langfuse
    if _langfuse is not None:
        return _langfuse

    if not settings.langfuse_public_key or not settings.langfuse_secret_key:
        logger.debug("LangFuse not configured, tracing disabled")
        return None

    try:
        from langfuse import Langfuse

        _langfuse = Langfuse(
            public_key=settings.langfuse_public_key,
            secret_key=settings.langfuse_secret_key,
            host=settings.langfuse_host,
        )
        logger.info("LangFuse initialized successfully")
        return _langfuse
    except Exception as e:
        logger.warning(f"Failed to initialize LangFuse: {e}")
        return None


def trace_llm_call(name: str = "llm_call"):
    """Decorator to trace a blocking Gemini call with LangFuse."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            lf = get_langfuse()
            if lf is None:
                return func(*args, **kwargs)

            trace = lf.trace(name=name)
            generation = trace.generation(
                name=name,
                model=settings.gemini_model,
                input=str(args[1] if len(args) > 1 else kwargs.get("text", ""))[:2000],
            )

            try:
                result = func(*args, **kwargs)
                generation.end(output=str(result)[:2000])
                return result
            except Exception as e:
                generation.end(output=f"ERROR: {e}", level="ERROR")
                raise

        return wrapper

    return decorator
