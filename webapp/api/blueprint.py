"""Blueprint that refuses to register API views without an auth decision."""
from __future__ import annotations

from collections.abc import Iterator
from typing import Callable

from flask_smorest import Blueprint as SmorestBlueprint

_AUTH_MARKERS = ("_auth_enforced", "_skip_auth")


def _unwrap_chain(func: Callable) -> Iterator[Callable]:
    """Yield *func* followed by every callable reachable via ``__wrapped__``."""

    seen: set[int] = set()
    current = func
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = getattr(current, "__wrapped__", None)


def declares_auth(func: Callable) -> bool:
    """Return ``True`` if *func* was decorated with ``jwt_required`` or ``skip_auth``."""

    return any(
        getattr(candidate, marker, False)
        for candidate in _unwrap_chain(func)
        for marker in _AUTH_MARKERS
    )


class AuthEnforcedBlueprint(SmorestBlueprint):
    """Blueprint raising at import time for views lacking an auth decorator."""

    def add_url_rule(  # type: ignore[override]
        self,
        rule,
        endpoint=None,
        view_func=None,
        provide_automatic_options=None,
        *,
        parameters=None,
        tags=None,
        **options,
    ):
        if view_func is None:
            raise TypeError("view_func must be provided")
        if not declares_auth(view_func):
            view_name = endpoint or getattr(view_func, "__name__", "<unnamed>")
            raise RuntimeError(
                f"API route '{rule}' (endpoint '{view_name}') must declare an authentication decorator."
            )

        return super().add_url_rule(
            rule,
            endpoint=endpoint,
            view_func=view_func,
            provide_automatic_options=provide_automatic_options,
            parameters=parameters,
            tags=tags,
            **options,
        )


__all__ = ["AuthEnforcedBlueprint", "declares_auth"]
