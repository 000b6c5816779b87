from __future__ import annotations
from typing import Any, Mapping

# Hash used for None, so that it never collides with small ints.
_NONE_HASH = 2433881


def equals(a: Any, b: Any) -> bool:
    """Structural equality over arbitrary values.

    Values of this package compare through their ``equals`` method,
    lists and tuples element-wise, mappings by keys and values.
    """
    if a is b:
        return True
    if a is None or b is None:
        return False
    eq = None if isinstance(a, type) else getattr(a, "equals", None)
    if callable(eq):
        return bool(eq(b))
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        return all(equals(x, y) for x, y in zip(a, b))
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if len(a) != len(b):
            return False
        for k, v in a.items():
            if k not in b or not equals(v, b[k]):
                return False
        return True
    return bool(a == b)


def hash_code(a: Any) -> int:
    """Hash consistent with :func:`equals`, also for unhashable containers."""
    if a is None:
        return _NONE_HASH
    hc = None if isinstance(a, type) else getattr(a, "hash_code", None)
    if callable(hc):
        return int(hc())
    if isinstance(a, (list, tuple)):
        h = 1
        for x in a:
            h = 31 * h + hash_code(x)
        return h
    if isinstance(a, Mapping):
        # order independent
        return sum(hash_code(k) ^ hash_code(v) for k, v in a.items())
    if isinstance(a, (set, frozenset)):
        return sum(hash_code(x) for x in a)
    if isinstance(a, bytearray):
        return hash(bytes(a))
    try:
        return hash(a)
    except TypeError:
        # unhashable but possibly ==-comparable; must not depend on identity
        return hash(type(a).__qualname__)
