"""Per-class sequential identifiers."""

from __future__ import annotations

import itertools
from typing import ClassVar, Iterator


class Identified:
    """Base class giving each instance an id, counted separately for every subclass."""

    _uuid_counter: ClassVar[Iterator[int]] = itertools.count()

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._uuid_counter = itertools.count()

    def __new__(cls, *args: object, **kwargs: object) -> "Identified":
        instance = super().__new__(cls)
        instance._uuid = next(cls._uuid_counter)
        return instance

    @property
    def uuid(self) -> int:
        return self._uuid