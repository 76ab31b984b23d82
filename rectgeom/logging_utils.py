from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

from .range import Range
from .rect import Rect

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 10
_repr.maxtuple = 10


def _format_range(value: Range) -> str:
    return f"[{value.start!r}, {value.end!r}]"


def _safe_repr(value: Any, *, max_items: int = 5, max_length: int = 400) -> str:
    """Compact repr for log lines: ranges and rects inline, arrays summarised."""

    if isinstance(value, Range):
        return _format_range(value)

    if isinstance(value, Rect):
        return f"Rect(x={_format_range(value.x)}, y={_format_range(value.y)})"

    if isinstance(value, np.ndarray):
        summary = f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
        if 0 < value.size <= max_items:
            summary += f", values={_repr.repr(value.tolist())}"
        return summary

    if isinstance(value, (list, tuple)) and not hasattr(value, "_fields"):
        items = []
        for idx, item in enumerate(value):
            if idx >= max_items:
                items.append("...")
                break
            items.append(_safe_repr(item))
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append("kwargs={" + ", ".join(f"{key}={_safe_repr(value)}" for key, value in kwargs.items()) + "}")
    if not parts:
        return "no-args"
    return ", ".join(parts)


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG entry and exit lines for each call."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("Exception in %s", qualname)
                raise
            if log_result:
                logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            else:
                logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def _apply_debug_logging_to_class(cls: type, logger: logging.Logger, skip: Set[str]) -> None:
    for attr_name, attr_value in list(cls.__dict__.items()):
        if attr_name.startswith("_"):
            continue
        qualified = f"{cls.__name__}.{attr_name}"
        if attr_name in skip or qualified in skip:
            continue
        if isinstance(attr_value, classmethod):
            func = attr_value.__func__
            if getattr(func, "__module__", None) != cls.__module__:
                continue
            setattr(cls, attr_name, classmethod(debug_log_call(logger, name=qualified)(func)))
        elif inspect.isfunction(attr_value) and getattr(attr_value, "__module__", None) == cls.__module__:
            setattr(cls, attr_name, debug_log_call(logger, name=qualified)(attr_value))


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public functions and class methods defined in ``namespace``."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set or name.startswith("_"):
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif inspect.isclass(value) and getattr(value, "__module__", None) == module_name:
            _apply_debug_logging_to_class(value, logger, skip_set)

    logger.debug("Call tracing enabled for %s", module_name)
