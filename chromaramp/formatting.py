from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional

from .types import OKLCH
from .utils.num_utils import js_round

_CHROMA_PLACES = Decimal("0.001")


def _chroma_text(c: float) -> str:
    # exact binary value, ties away from zero
    return str(Decimal(c).quantize(_CHROMA_PLACES, rounding=ROUND_HALF_UP))


def format_css(color: OKLCH, alpha: Optional[float] = None) -> str:
    """
    Render a coordinate as a CSS ``oklch()`` function.

    Lightness as a whole percentage, chroma with three decimals, hue in whole
    degrees. ``alpha`` (or the coordinate's own alpha) is appended after a
    slash.

    >>> format_css(OKLCH(0.98, 0.04, 212.4))
    'oklch(98% 0.040 212)'
    """
    alpha = color.alpha if alpha is None else alpha
    body = f"{js_round(color.l * 100)}% {_chroma_text(color.c)} {js_round(color.h)}"
    if alpha is None:
        return f"oklch({body})"
    return f"oklch({body} / {alpha:g})"


def format_ramp(ramp: Iterable[OKLCH]) -> List[str]:
    """Format every entry, in ramp order."""
    return [format_css(color) for color in ramp]


def contrast_ratio(a: OKLCH, b: OKLCH) -> float:
    """
    Rough lightness contrast between two coordinates, in ``[1, 21]``.

    Uses OK lightness directly in place of relative luminance, so it is a
    quick ordering aid for picking text on a surface, not a WCAG figure.
    """
    lighter = max(a.l, b.l) + 0.05
    darker = min(a.l, b.l) + 0.05
    return lighter / darker
