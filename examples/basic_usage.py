"""Basic lineargradient usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from lineargradient import (
    AngleConvention,
    Color,
    LinearGradientWithAngle,
    RectSize,
    TileMode,
    css_to_cartesian,
)
from lineargradient.samples.demo import (
    DEMO_ANGLES,
    DEMO_BACKGROUND,
    DEMO_COLORS,
    DEMO_HEIGHT,
    DEMO_STOPS,
    DEMO_WIDTH,
)


def demonstrate_endpoints() -> None:
    # One row per demo angle, same box for all of them.
    size = RectSize(DEMO_WIDTH, DEMO_HEIGHT)
    print("background:", Color.from_argb(DEMO_BACKGROUND).to_hex())
    for angle in DEMO_ANGLES:
        gradient = LinearGradientWithAngle(DEMO_COLORS, stops=DEMO_STOPS, angle=angle)
        fill = gradient.create_fill(size)
        print(
            f"angle: {angle:6.1f} -> start=({fill.start.x:8.2f}, {fill.start.y:8.2f}) "
            f"end=({fill.end.x:8.2f}, {fill.end.y:8.2f}) length={fill.length:.2f}"
        )


def demonstrate_conventions() -> None:
    # CSS 0deg points up, which is 90deg in cartesian terms.
    print("css 0deg as cartesian:", css_to_cartesian(0))
    css = LinearGradientWithAngle(DEMO_COLORS, angle=0, convention=AngleConvention.CSS)
    cartesian = LinearGradientWithAngle(DEMO_COLORS, angle=90)
    print("same gradient:", css == cartesian)


def demonstrate_tile_modes() -> None:
    size = (100.0, 100.0)
    for mode in TileMode:
        fill = LinearGradientWithAngle(DEMO_COLORS, tile_mode=mode).create_fill(size)
        # x = -25 and x = 125 lie a quarter line outside either end
        print(mode.value, fill.parameter_at([(-25.0, 50.0), (50.0, 50.0), (125.0, 50.0)]))


if __name__ == "__main__":
    demonstrate_endpoints()
    demonstrate_conventions()
    demonstrate_tile_modes()
