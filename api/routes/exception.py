"""
Exception translation for forecast API route functions.

:func:`handle_exceptions` wraps an endpoint handler so that an
:class:`fastapi.HTTPException` raised on purpose (an unknown demo metric, for
instance) keeps its status code, while anything unexpected is logged with its
traceback and returned as a ``500`` carrying the exception message.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from fastapi import HTTPException

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _internal_error(func: Callable[..., Any], exc: Exception) -> HTTPException:
    log.exception("unhandled error in %s", func.__name__)
    return HTTPException(status_code=500, detail=str(exc))


def handle_exceptions(func: F) -> F:
    """Convert uncaught exceptions raised by a route into HTTP 500 errors.

    Works with both regular and async handlers.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise _internal_error(func, exc) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            raise _internal_error(func, exc) from exc

    return cast(F, sync_wrapper)
