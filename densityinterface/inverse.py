"""Registry of functions known to be inverses of each other."""
import logging
from typing import Callable, Dict

_INVERSES: Dict[Callable, Callable] = {}


def register_inverse(fn: Callable, inverse_fn: Callable):
    """Record that `fn` and `inverse_fn` are inverses of each other (in both directions)."""
    _INVERSES[fn] = inverse_fn
    _INVERSES[inverse_fn] = fn
    logging.debug(f"Registered {inverse_fn!r} as inverse of {fn!r}")


def inverse(fn: Callable) -> Callable:
    """Return the registered inverse of `fn`."""
    try:
        return _INVERSES[fn]
    except KeyError:
        raise ValueError(f"No inverse registered for {fn!r}") from None
