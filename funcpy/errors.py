from __future__ import annotations
from .logger import logger


class FuncpyError(Exception):
    pass


class NoSuchElementError(FuncpyError):
    """Raised by a partial accessor called on the wrong variant.

    ``label`` names the accessor, e.g. ``"Option.get"``.
    """

    def __init__(self, label: str):
        super().__init__(label); self.label = label


def no_such_element(label: str) -> NoSuchElementError:
    logger.debug("partial accessor on wrong variant", op=label)
    return NoSuchElementError(label)
