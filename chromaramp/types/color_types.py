from __future__ import annotations
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union, overload

import numpy as np
from numpy import ndarray
from boundednumbers.functions import clamp

from .space_type import MAX_CHROMA, MAX_LIGHTNESS
from ..utils.num_utils import wrap_degrees

Scalar = int | float
LCHTuple = Tuple[float, float, float]


class OKLCH:
    """
    A single color coordinate: lightness, chroma, hue and optional alpha.

    Instances are immutable and hashable. Construction does not validate
    ranges; use :meth:`clamped` to fold a raw coordinate into
    ``l in [0, 1]``, ``c in [0, 0.4]``, ``h in [0, 360)``.
    """
    __slots__ = ('_l', '_c', '_h', '_alpha', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, l: Scalar, c: Scalar, h: Scalar, alpha: Optional[Scalar] = None) -> None:
        self._l = float(l)
        self._c = float(c)
        self._h = float(h)
        self._alpha = None if alpha is None else float(alpha)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def clamped(cls, l: Scalar, c: Scalar, h: Scalar, alpha: Optional[Scalar] = None) -> OKLCH:
        return cls(
            clamp(float(l), 0.0, MAX_LIGHTNESS),
            clamp(float(c), 0.0, MAX_CHROMA),
            wrap_degrees(float(h), 0.0),
            None if alpha is None else clamp(float(alpha), 0.0, 1.0),
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def l(self) -> float:
        return self._l

    @property
    def c(self) -> float:
        return self._c

    @property
    def h(self) -> float:
        return self._h

    @property
    def alpha(self) -> Optional[float]:
        return self._alpha

    @property
    def has_alpha(self) -> bool:
        return self._alpha is not None

    def as_tuple(self) -> LCHTuple:
        return (self._l, self._c, self._h)

    def with_alpha(self, alpha: Optional[Scalar]) -> OKLCH:
        """Return a copy with ``alpha`` replaced (None removes it)."""
        if alpha is None:
            return OKLCH(self._l, self._c, self._h)
        return OKLCH(self._l, self._c, self._h, clamp(float(alpha), 0.0, 1.0))

    def replace(self, l: Optional[Scalar] = None, c: Optional[Scalar] = None, h: Optional[Scalar] = None) -> OKLCH:
        return OKLCH(
            self._l if l is None else l,
            self._c if c is None else c,
            self._h if h is None else h,
            self._alpha,
        )

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OKLCH):
            return NotImplemented
        return self.as_tuple() == other.as_tuple() and self._alpha == other._alpha

    def __hash__(self) -> int:
        return hash((self._l, self._c, self._h, self._alpha))

    def __repr__(self) -> str:
        if self._alpha is None:
            return f"OKLCH(l={self._l!r}, c={self._c!r}, h={self._h!r})"
        return f"OKLCH(l={self._l!r}, c={self._c!r}, h={self._h!r}, alpha={self._alpha!r})"


class Ramp(Sequence[OKLCH]):
    """
    An ordered, immutable sequence of :class:`OKLCH` coordinates.

    Index 0 is the start anchor and the last index the end anchor. The order
    is the traversal path through the color space and is never re-sorted.
    """
    __slots__ = ('_colors',)

    def __init__(self, colors: Iterable[OKLCH] = ()) -> None:
        colors = tuple(colors)
        for color in colors:
            if not isinstance(color, OKLCH):
                raise TypeError(f"Ramp entries must be OKLCH, got {type(color).__name__}")
        self._colors: Tuple[OKLCH, ...] = colors

    @classmethod
    def from_channels(cls, l: ndarray, c: ndarray, h: ndarray) -> Ramp:
        """Build a ramp from three equal-length channel arrays."""
        if not (len(l) == len(c) == len(h)):
            raise ValueError(
                f"Channel lengths differ: l={len(l)}, c={len(c)}, h={len(h)}"
            )
        return cls(OKLCH(li, ci, hi) for li, ci, hi in zip(l.tolist(), c.tolist(), h.tolist()))

    @classmethod
    def from_array(cls, arr: ndarray) -> Ramp:
        arr = np.asarray(arr, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[-1] not in (3, 4):
            raise ValueError(f"Ramp arrays must have shape (n, 3) or (n, 4), got {arr.shape}")
        if arr.shape[-1] == 3:
            return cls.from_channels(arr[:, 0], arr[:, 1], arr[:, 2])
        return cls(OKLCH(*row) for row in arr.tolist())

    def as_array(self) -> ndarray:
        """Return an ``(n, 3)`` float64 array of ``(l, c, h)`` rows."""
        if not self._colors:
            return np.empty((0, 3), dtype=np.float64)
        return np.array([color.as_tuple() for color in self._colors], dtype=np.float64)

    @property
    def start(self) -> OKLCH:
        return self._colors[0]

    @property
    def end(self) -> OKLCH:
        return self._colors[-1]

    @overload
    def __getitem__(self, index: int) -> OKLCH: ...
    @overload
    def __getitem__(self, index: slice) -> Ramp: ...
    def __getitem__(self, index: Union[int, slice]) -> Union[OKLCH, Ramp]:
        if isinstance(index, slice):
            return Ramp(self._colors[index])
        return self._colors[index]

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[OKLCH]:
        return iter(self._colors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ramp):
            return self._colors == other._colors
        if isinstance(other, (list, tuple)):
            return self._colors == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return f"Ramp({list(self._colors)!r})"
