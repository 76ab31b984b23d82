"""Example: lay out a toolbar, sidebar and badge inside a window rect."""

from rectgeom import Padding, Range, Rect

WINDOW = Rect.from_w_h(800, 600)


def main() -> None:
    content = WINDOW.padding(Padding(x=Range(16, 16), y=Range(16, 48)))

    toolbar = Rect.from_w_h(content.w(), 32).mid_top_of(WINDOW)
    sidebar = Rect.from_w_h(200, content.h()).mid_left_of(content)
    badge = Rect.from_w_h(24, 24).top_right_of(toolbar.pad(4))
    canvas = content.pad_left(sidebar.w() + 8)

    for name, rect in (
        ("window", WINDOW),
        ("content", content),
        ("toolbar", toolbar),
        ("sidebar", sidebar),
        ("badge", badge),
        ("canvas", canvas),
    ):
        left, bottom, w, h = rect.l_b_w_h()
        print(f"{name:8s} left={left:7.1f} bottom={bottom:7.1f} w={w:6.1f} h={h:6.1f}")

    print("canvas quadrants:")
    for sub in canvas.subdivisions():
        print(f"  {sub.l_r_b_t()}")


if __name__ == "__main__":
    main()
