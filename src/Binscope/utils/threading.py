"""Threading utilities."""

import threading
from collections.abc import Callable
from functools import wraps

from .paths import APP_NAME


def run_in_thread(func: Callable) -> Callable:
    """Decorator to run a function in a named daemon thread.

    The wrapper returns the started thread; the function's own return value
    is discarded, so results have to be handed back some other way (a Qt
    signal, a callback).
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        thread = threading.Thread(
            target=func,
            args=args,
            kwargs=kwargs,
            name=f'{APP_NAME}-{func.__name__}',
            daemon=True,
        )
        thread.start()
        return thread

    return wrapper
