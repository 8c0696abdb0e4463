"""Gallery display state as a tagged variant.

A state is exactly one of Loading, Loaded or Failed. ``Loading`` remembers the
last successful result so the page can keep showing a complete image/breed
pair while a new fetch is in flight.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Loaded:
    image_url: str
    breed_name: str

    loading = False

    @property
    def displayed(self) -> Optional["Loaded"]:
        return self


@dataclass(frozen=True)
class Loading:
    previous: Optional[Loaded] = None

    loading = True

    @property
    def displayed(self) -> Optional[Loaded]:
        return self.previous


@dataclass(frozen=True)
class Failed:
    loading = False

    @property
    def displayed(self) -> Optional[Loaded]:
        return None


DisplayState = Union[Loading, Loaded, Failed]


def flatten(state: DisplayState) -> dict:
    """Project a state onto ``{breed_name, image_url, loading}``."""
    shown = state.displayed
    return {
        "breed_name": shown.breed_name if shown else None,
        "image_url": shown.image_url if shown else None,
        "loading": state.loading,
    }
