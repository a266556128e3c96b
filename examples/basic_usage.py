"""Basic chromaramp usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaramp import ColorEngine, OKLCH, contrast_ratio, format_css
from chromaramp.curves import available_curves, resolve_curve


def demonstrate_ramps() -> None:
    # Same seed, same ramp: the seed is all a token file needs to store.
    engine = ColorEngine("brand-blue")
    result = engine.generate(
        steps=9,
        hue={"start": 250, "end": 290, "curve": "softStart"},
        lightness={"curve": "easeOut", "accent": 1.6},
    )
    print("seed:", result.seed)
    for css in result.css():
        print("  ", css)

    print("roles:", result.role_css())

    surface, primary = result.roles["surface"], result.roles["primary"]
    print("surface/primary contrast: %.2f" % contrast_ratio(surface, primary))


def demonstrate_rotations() -> None:
    # One full extra turn of the hue wheel across the ramp.
    rainbow = ColorEngine(7).generate(
        steps=12,
        hue={"start": 0, "end": 0, "rotations": 1, "curve": "linear"},
        chroma={"start": 0.15, "end": 0.15},
        lightness={"start": 0.7, "end": 0.7},
        space="rybittern",
    )
    print("rainbow:", " ".join(rainbow.css()))


def demonstrate_curves() -> None:
    for name in available_curves():
        curve = resolve_curve(name, accent=1.0)
        samples = ", ".join("%.2f" % v for v in curve.sample(5))
        print(f"{name:>12}: {samples}")
    print(format_css(OKLCH(0.62, 0.19, 28.0, alpha=0.8)))


if __name__ == "__main__":
    demonstrate_ramps()
    demonstrate_rotations()
    demonstrate_curves()
