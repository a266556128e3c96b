from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from ..curves import CurveSpec
from ..errors import InvalidConfiguration
from ..rng import Seed
from ..types import ColorSpace

DEFAULT_STEPS = 12
DEFAULT_ACCENT = 1.0
HUE_JITTER = 8.0
HUE_END_SPREAD = 240.0


@dataclass(frozen=True)
class Track:
    """
    Start/end/curve/accent configuration for one channel.

    ``None`` fields fall back to the channel default when the ramp is built.
    """
    start: Optional[float] = None
    end: Optional[float] = None
    curve: Optional[CurveSpec] = None
    accent: Optional[float] = None


@dataclass(frozen=True)
class HueTrack(Track):
    """Hue track; ``rotations`` adds full 360 degree turns to the sweep."""
    rotations: Optional[float] = None


LIGHTNESS_DEFAULTS = Track(start=0.98, end=0.12, curve="easeOut", accent=DEFAULT_ACCENT)
CHROMA_DEFAULTS = Track(start=0.04, end=0.18, curve="arc", accent=DEFAULT_ACCENT)
# start and end stay None: they are drawn from the generator
HUE_DEFAULTS = HueTrack(curve="softStart", accent=DEFAULT_ACCENT, rotations=0.0)

# Keys accepted in the mapping form; "easing" is the front-end spelling of "curve"
_TRACK_KEY_ALIASES = {"easing": "curve"}

TrackLike = Union[Track, Mapping[str, Any], None]


def _coerce_track(value: TrackLike, cls: type, channel: str) -> Track:
    if value is None:
        return cls()
    if isinstance(value, cls):
        return value
    if isinstance(value, Track):
        # a plain Track given for the hue channel
        return cls(**{f.name: getattr(value, f.name) for f in fields(Track)})
    if not isinstance(value, Mapping):
        raise InvalidConfiguration(
            f"{channel} track must be a {cls.__name__} or a mapping, got {type(value).__name__}"
        )
    allowed = {f.name for f in fields(cls)}
    kwargs = {}
    for key, item in value.items():
        name = _TRACK_KEY_ALIASES.get(key, key)
        if name not in allowed:
            raise InvalidConfiguration(f"Unknown {channel} track option: {key!r}")
        kwargs[name] = item
    return cls(**kwargs)


@dataclass(frozen=True)
class RampOptions:
    """
    Everything a ramp generation call can be configured with.

    All fields are optional. ``seed`` set here makes the call use its own
    generator instead of the engine's; ``strict_curves`` turns unknown curve
    names into :class:`~chromaramp.errors.UnknownCurveError` instead of the
    silent fallback to ``linear``.
    """
    steps: int = DEFAULT_STEPS
    seed: Optional[Seed] = None
    hue: HueTrack = field(default_factory=HueTrack)
    chroma: Track = field(default_factory=Track)
    lightness: Track = field(default_factory=Track)
    space: Union[ColorSpace, str] = ColorSpace.OKLCH
    roles: Optional[Mapping[str, float]] = None
    strict_curves: bool = False

    def __post_init__(self) -> None:
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "hue", _coerce_track(self.hue, HueTrack, "hue"))
        object.__setattr__(self, "chroma", _coerce_track(self.chroma, Track, "chroma"))
        object.__setattr__(self, "lightness", _coerce_track(self.lightness, Track, "lightness"))
        if self.roles is not None:
            object.__setattr__(self, "roles", MappingProxyType(dict(self.roles)))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> RampOptions:
        """Build options from the nested-dict form, e.g. ``{"steps": 5, "hue": {"start": 0}}``."""
        allowed = {f.name for f in fields(cls)}
        unknown = set(mapping) - allowed
        if unknown:
            raise InvalidConfiguration(f"Unknown ramp options: {sorted(unknown)}")
        return cls(**{k: v for k, v in mapping.items() if v is not None})

    @classmethod
    def build(cls, options: Union[RampOptions, Mapping[str, Any], None] = None, **overrides: Any) -> RampOptions:
        """Coerce ``options`` and apply keyword ``overrides`` on top."""
        if options is None:
            base = cls()
        elif isinstance(options, RampOptions):
            base = options
        elif isinstance(options, Mapping):
            base = cls.from_mapping(options)
        else:
            raise InvalidConfiguration(
                f"options must be RampOptions or a mapping, got {type(options).__name__}"
            )
        if not overrides:
            return base
        allowed = {f.name for f in fields(cls)}
        unknown = set(overrides) - allowed
        if unknown:
            raise InvalidConfiguration(f"Unknown ramp options: {sorted(unknown)}")
        return replace(base, **overrides)
