"""Resolve semantic role names to concrete ramp entries."""
import warnings
from types import MappingProxyType
from typing import Mapping, Optional

from boundednumbers import UnitFloat
from boundednumbers.functions import clamp

from .types import OKLCH, Ramp
from .utils.num_utils import js_round, require_finite

DEFAULT_ROLES: Mapping[str, float] = MappingProxyType({
    "surface": 0.0,
    "primary": 0.5,
    "accent": 0.85,
})


def role_index(t: float, steps: int) -> int:
    """Ramp index nearest to fractional position ``t`` (halves round up)."""
    return js_round(float(t) * (steps - 1))


def _role_position(name: str, t: float) -> UnitFloat:
    t = require_finite(t, f"role {name!r} position")
    if not 0.0 <= t <= 1.0:
        warnings.warn(
            f"Role {name!r} position {t} is outside [0, 1], clamping",
            RuntimeWarning,
            stacklevel=3,
        )
        t = clamp(t, 0.0, 1.0)
    return UnitFloat(t)


def resolve_roles(ramp: Ramp, roles: Optional[Mapping[str, float]] = None) -> Mapping[str, OKLCH]:
    """
    Map each role name to the ramp entry at its fractional position.

    Role colors are always exact ramp members; there is no interpolation
    between entries.

    Args:
        ramp: A non-empty ramp.
        roles: Role name to position in ``[0, 1]``. Defaults to
               :data:`DEFAULT_ROLES`.

    Returns:
        A read-only mapping from role name to :class:`OKLCH`.
    """
    if len(ramp) == 0:
        raise ValueError("Cannot resolve roles on an empty ramp")
    if roles is None:
        roles = DEFAULT_ROLES
    steps = len(ramp)
    resolved = {
        name: ramp[role_index(_role_position(name, t), steps)]
        for name, t in roles.items()
    }
    return MappingProxyType(resolved)
