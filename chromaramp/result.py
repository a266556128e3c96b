from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Mapping, Union

from numpy import ndarray

from .formatting import format_css, format_ramp
from .types import OKLCH, ColorSpace, Ramp


@dataclass(frozen=True)
class RampResult:
    """
    The outcome of one generation call.

    Attributes:
        ramp: The transformed ramp, in traversal order.
        roles: Role name to ramp entry.
        seed: Generator state before the first draw; seeding a new engine
            with it reproduces this ramp.
        space: Color space the ramp was transformed into.
    """
    ramp: Ramp
    roles: Mapping[str, OKLCH]
    seed: int
    space: Union[ColorSpace, str] = ColorSpace.OKLCH

    def css(self) -> List[str]:
        """One ``oklch()`` string per ramp entry, in ramp order."""
        return format_ramp(self.ramp)

    def role_css(self) -> Dict[str, str]:
        return {name: format_css(color) for name, color in self.roles.items()}

    def as_array(self) -> ndarray:
        return self.ramp.as_array()

    def __len__(self) -> int:
        return len(self.ramp)
