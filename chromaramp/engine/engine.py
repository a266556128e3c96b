from __future__ import annotations
from typing import Any, Mapping, Optional, Tuple, Union

import numpy as np

from ..curves import Curve, resolve_curve
from ..errors import InvalidConfiguration
from ..result import RampResult
from ..rng import Seed, SeededRNG
from ..roles import resolve_roles
from ..transforms import apply_transform
from ..types import MAX_CHROMA, MAX_LIGHTNESS, HUE_360, Ramp
from ..utils import require_finite, unit_positions, value_or_default, wrap_degrees
from .options import (
    CHROMA_DEFAULTS,
    HUE_DEFAULTS,
    HUE_END_SPREAD,
    HUE_JITTER,
    LIGHTNESS_DEFAULTS,
    RampOptions,
    Track,
)

OptionsLike = Union[RampOptions, Mapping[str, Any], None]


def hue_delta(start: float, end: float, rotations: float = 0.0) -> float:
    """
    Signed hue sweep from ``start`` to ``end`` before easing.

    The direct difference is wrapped into ``[-180, 180]`` (shortest way
    round), then ``rotations * 360`` is added. The sum may exceed 180 in
    either direction; that is how multi-turn sweeps are encoded.
    """
    delta = end - start
    if delta > 180:
        delta -= HUE_360
    if delta < -180:
        delta += HUE_360
    return delta + rotations * HUE_360


def validate_steps(steps: Any) -> int:
    if isinstance(steps, bool) or not isinstance(steps, (int, np.integer, float)):
        raise InvalidConfiguration(f"steps must be an integer, got {steps!r}")
    if isinstance(steps, float):
        if not steps.is_integer():
            raise InvalidConfiguration(f"steps must be an integer, got {steps!r}")
        steps = int(steps)
    steps = int(steps)
    if steps < 1:
        raise InvalidConfiguration(f"steps must be at least 1, got {steps}")
    return steps


def _resolve_track(track: Track, defaults: Track, channel: str, strict: bool) -> Tuple[float, float, Curve]:
    start = require_finite(value_or_default(track.start, defaults.start), f"{channel}.start")
    end = require_finite(value_or_default(track.end, defaults.end), f"{channel}.end")
    accent = require_finite(value_or_default(track.accent, defaults.accent), f"{channel}.accent")
    curve = resolve_curve(value_or_default(track.curve, defaults.curve), accent, strict=strict)
    return start, end, curve


def _channel(start: float, end: float, curve: Curve, t: np.ndarray, upper: float) -> np.ndarray:
    # clamp last: out-of-range anchors still shape the curve
    return np.clip(start + (end - start) * curve(t), 0.0, upper)


class ColorEngine:
    """
    Generates ramps from a seed and per-channel tracks.

    The engine owns one :class:`~chromaramp.rng.SeededRNG`; every
    :meth:`generate` call that omits hue anchors draws from it, so a sequence
    of calls on one engine is reproducible as a whole. Pass ``seed`` in the
    options to give a single call its own fresh generator.

    Engines are not thread-safe: share one only with external locking.

    >>> engine = ColorEngine(123)
    >>> result = engine.generate(steps=5)
    >>> len(result.ramp), result.ramp[0].l
    (5, 0.98)
    """

    def __init__(self, seed: Optional[Seed] = None) -> None:
        self._rng = SeededRNG(seed)

    @property
    def seed(self) -> int:
        return self._rng.seed

    @property
    def rng(self) -> SeededRNG:
        return self._rng

    def generate(self, options: OptionsLike = None, **overrides: Any) -> RampResult:
        """
        Build a ramp.

        Args:
            options: :class:`RampOptions` or the equivalent nested mapping.
            **overrides: Individual option fields applied on top of
                ``options`` (``steps=5``, ``hue={"start": 30}``, ...).

        Returns:
            A :class:`~chromaramp.result.RampResult`.

        Raises:
            InvalidConfiguration: For a step count below 1, a non-integral
                step count, non-finite anchors, or (with ``strict_curves``)
                an unknown curve name.
        """
        opts = RampOptions.build(options, **overrides)
        rng = SeededRNG(opts.seed) if opts.seed is not None else self._rng
        # the state before the first draw replays this exact call
        start_state = rng.state
        ramp = self._build_ramp(opts, rng)
        final = apply_transform(ramp, opts.space)
        roles = resolve_roles(final, opts.roles)
        return RampResult(ramp=final, roles=roles, seed=start_state, space=opts.space)

    def _build_ramp(self, opts: RampOptions, rng: SeededRNG) -> Ramp:
        # validate everything before the first draw so a rejected call
        # leaves the generator untouched
        steps = validate_steps(opts.steps)
        strict = opts.strict_curves
        hue = opts.hue
        l_start, l_end, l_curve = _resolve_track(opts.lightness, LIGHTNESS_DEFAULTS, "lightness", strict)
        c_start, c_end, c_curve = _resolve_track(opts.chroma, CHROMA_DEFAULTS, "chroma", strict)
        rotations = require_finite(value_or_default(hue.rotations, HUE_DEFAULTS.rotations), "hue.rotations")
        h_accent = require_finite(value_or_default(hue.accent, HUE_DEFAULTS.accent), "hue.accent")
        h_curve = resolve_curve(value_or_default(hue.curve, HUE_DEFAULTS.curve), h_accent, strict=strict)
        given_start = None if hue.start is None else require_finite(hue.start, "hue.start")
        given_end = None if hue.end is None else require_finite(hue.end, "hue.end")

        # draw order: hue start, hue end, then the two draws of the jitter
        h_start = rng.next() * HUE_360 if given_start is None else given_start
        if given_end is None:
            h_end = (h_start + rng.next() * HUE_END_SPREAD - HUE_END_SPREAD / 2 + HUE_360) % HUE_360
        else:
            h_end = given_end

        delta = hue_delta(h_start, h_end, rotations)
        actual_start = h_start + rng.gaussian(0, HUE_JITTER)

        t = unit_positions(steps)
        l = _channel(l_start, l_end, l_curve, t, MAX_LIGHTNESS)
        c = _channel(c_start, c_end, c_curve, t, MAX_CHROMA)
        h = wrap_degrees(actual_start + delta * h_curve(t))
        return Ramp.from_channels(l, c, h)

    @classmethod
    def random(cls, options: OptionsLike = None, **overrides: Any) -> RampResult:
        """Generate one ramp from a fresh, entropy-seeded engine."""
        return cls().generate(options, **overrides)

    def __repr__(self) -> str:
        return f"ColorEngine(seed={self.seed})"


def generate_ramp(options: OptionsLike = None, seed: Optional[Seed] = None, **overrides: Any) -> RampResult:
    """Generate a ramp with a new engine; the usual one-call entry point."""
    return ColorEngine(seed).generate(options, **overrides)
