from .registry import (
    RampTransform,
    apply_transform,
    get_transform,
    identity_transform,
    register_transform,
    unregister_transform,
)
from .rybittern import (
    boost_chroma,
    np_boost_chroma,
    np_rybittern_hue,
    rybittern_color,
    rybittern_hue,
    rybittern_transform,
)

__all__ = [
    "RampTransform",
    "apply_transform",
    "get_transform",
    "identity_transform",
    "register_transform",
    "unregister_transform",
    "boost_chroma",
    "np_boost_chroma",
    "np_rybittern_hue",
    "rybittern_color",
    "rybittern_hue",
    "rybittern_transform",
]
