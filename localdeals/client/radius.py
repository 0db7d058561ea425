"""Radius bucket selection.

The user picks one of a fixed set of search radii; the choice lives only as
long as the screen that owns it and is never persisted.
"""

from enum import Enum
from typing import Callable, Union

from localdeals.errors import InvalidArgument


class RadiusBucket(float, Enum):
    """User-selectable search radii in kilometers."""

    TWO = 2.0
    FIVE = 5.0
    TEN = 10.0
    FIFTEEN = 15.0
    TWENTY = 20.0
    ALL = 50.0

    @property
    def label(self) -> str:
        if self is RadiusBucket.ALL:
            return "All"
        return f"{self.value:g} km"


# Large enough to mean "every offer we fetched"
RADIUS_ALL_KM: float = RadiusBucket.ALL.value

DEFAULT_BUCKET = RadiusBucket.FIVE

RadiusListener = Callable[[RadiusBucket], None]


class RadiusSelection:
    """Currently selected radius bucket, 5 km until the user picks another."""

    def __init__(self, initial: RadiusBucket = DEFAULT_BUCKET):
        self._bucket = initial
        self._listeners: list[RadiusListener] = []

    @property
    def bucket(self) -> RadiusBucket:
        return self._bucket

    @property
    def radius_km(self) -> float:
        return self._bucket.value

    @property
    def label(self) -> str:
        return self._bucket.label

    @staticmethod
    def options() -> list[RadiusBucket]:
        """Buckets in picker order."""
        return list(RadiusBucket)

    def subscribe(self, listener: RadiusListener) -> None:
        """Call ``listener`` with the new bucket after every change."""
        self._listeners.append(listener)

    def select(self, choice: Union[RadiusBucket, float, int]) -> RadiusBucket:
        """Switch to a bucket given as enum member or its km value."""
        try:
            bucket = RadiusBucket(choice)
        except ValueError:
            raise InvalidArgument(
                f"Unsupported radius {choice!r}; choose one of "
                + ", ".join(option.label for option in RadiusBucket)
            ) from None

        if bucket is self._bucket:
            return bucket

        self._bucket = bucket
        for listener in self._listeners:
            listener(bucket)
        return bucket
