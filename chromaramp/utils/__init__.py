from .default import value_or_default
from .num_utils import js_round, wrap_degrees, require_finite, unit_positions

__all__ = ["value_or_default", "js_round", "wrap_degrees", "require_finite", "unit_positions"]
