"""
Opaque record id generation.

Ids are short random strings drawn from the URL‑safe nanoid alphabet
using ``secrets``.  With the default length of 6 characters there are
64**6 (about 6.9e10) possible ids, so collisions between live records
are negligible but not impossible; the store checks for them.
"""

import secrets
from typing import Callable

ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"
DEFAULT_ID_LENGTH = 6

IdFactory = Callable[[], str]


def generate_id(size: int = DEFAULT_ID_LENGTH) -> str:
    if size < 1:
        raise ValueError("id size must be positive")
    return "".join(secrets.choice(ALPHABET) for _ in range(size))


def make_id_factory(size: int = DEFAULT_ID_LENGTH) -> IdFactory:
    """Return a zero‑argument callable producing ids of ``size`` characters."""
    if size < 1:
        raise ValueError("id size must be positive")
    return lambda: generate_id(size)
