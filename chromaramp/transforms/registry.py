from typing import Callable, Dict, Union

from ..types import ColorSpace, Ramp
from .rybittern import rybittern_transform

RampTransform = Callable[[Ramp], Ramp]


def identity_transform(ramp: Ramp) -> Ramp:
    return ramp


_TRANSFORMS: Dict[str, RampTransform] = {
    ColorSpace.OKLCH.value: identity_transform,
    ColorSpace.RYBITTERN.value: rybittern_transform,
}


def _space_key(space: Union[ColorSpace, str]) -> str:
    return space.value if isinstance(space, ColorSpace) else str(space)


def register_transform(space: Union[ColorSpace, str], transform: RampTransform) -> None:
    """
    Install a transform for a color space identifier.

    Built-in spaces cannot be replaced; reserved identifiers (``okhsl``,
    ``lch``, ...) and new names can.
    """
    key = _space_key(space)
    if key in (ColorSpace.OKLCH.value, ColorSpace.RYBITTERN.value):
        raise ValueError(f"Cannot replace the built-in transform for {key!r}")
    if not callable(transform):
        raise TypeError(f"Transform must be callable, got {type(transform).__name__}")
    _TRANSFORMS[key] = transform


def unregister_transform(space: Union[ColorSpace, str]) -> None:
    key = _space_key(space)
    if key in (ColorSpace.OKLCH.value, ColorSpace.RYBITTERN.value):
        raise ValueError(f"Cannot remove the built-in transform for {key!r}")
    _TRANSFORMS.pop(key, None)


def get_transform(space: Union[ColorSpace, str]) -> RampTransform:
    """Transform for ``space``; unknown identifiers get the identity."""
    return _TRANSFORMS.get(_space_key(space), identity_transform)


def apply_transform(ramp: Ramp, space: Union[ColorSpace, str] = ColorSpace.OKLCH) -> Ramp:
    """
    Remap a ramp into ``space``.

    ``oklch`` returns the ramp unchanged, ``rybittern`` applies the
    perceptual hue remap, and any other identifier passes through.
    """
    return get_transform(space)(ramp)
