"""Argument values for log calls and how they turn into text.

Only ``render_argument`` converts an argument to a string, and the formatter
only calls it after the severity gate has accepted the call. A
``Renderable`` makes the deferral explicit for values whose text is
expensive to build.
"""

from typing import Any, Callable, Optional, Sequence

PRIMITIVE_TYPES = (bool, int, float, complex)

CYCLE_MARKER = "[...]"


class Renderable:
    """Wraps a zero-argument callable that produces a display string.

    The callable is invoked each time ``render()`` is called and never
    before.
    """

    __slots__ = ("_render",)

    def __init__(self, render: Callable[[], Any]):
        if not callable(render):
            raise TypeError("render must be callable")
        self._render = render

    def render(self) -> str:
        return str(self._render())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        # A bound method of self would repr back into this method.
        if getattr(self._render, "__self__", None) is self:
            return f"<{type(self).__name__}>"
        return f"{type(self).__name__}({self._render!r})"


def deferred(func: Callable[..., Any], *args, **kwargs) -> Renderable:
    """Builds a ``Renderable`` that calls ``func(*args, **kwargs)`` lazily."""
    return Renderable(lambda: func(*args, **kwargs))


def as_argument_list(args: Any) -> list[Any]:
    """Normalizes an argument sequence into a list.

    A bare string (or bytes) counts as one argument, not as a sequence of
    characters.
    """
    if args is None:
        return []
    if isinstance(args, (str, bytes)):
        return [args]
    return list(args)


def split_trailing_error(
    args: Optional[Sequence[Any]],
) -> tuple[list[Any], Optional[BaseException]]:
    """Detaches an exception in the last argument position.

    Returns:
        The remaining arguments and the detached exception (or None).
    """
    values = as_argument_list(args)
    if values and isinstance(values[-1], BaseException):
        return values[:-1], values[-1]
    return values, None


def render_argument(value: Any, _seen: Optional[set[int]] = None) -> str:
    """Converts one argument to its display string.

    Strings and primitives convert directly, ``Renderable`` values call
    ``render()``, plain lists and tuples render element by element, everything
    else goes through ``str()``. Exceptions raised while rendering are not
    caught.
    """
    if value is None or isinstance(value, (str,) + PRIMITIVE_TYPES):
        return str(value)
    if isinstance(value, Renderable):
        return value.render()
    # Exact types only: namedtuples and other subclasses keep their own str().
    if type(value) in (list, tuple):
        seen = _seen if _seen is not None else set()
        if id(value) in seen:
            return CYCLE_MARKER
        seen.add(id(value))
        try:
            return "[" + ", ".join(render_argument(v, seen) for v in value) + "]"
        finally:
            seen.discard(id(value))
    return str(value)
