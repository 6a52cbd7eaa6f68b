"""
Unit tests for the layout calculator

Covers straight and arc placement, their degenerate inputs and the
dispatch helper.
"""
import math
import pytest

from satlayout.layout.calculator import (
    compute_straight_layout,
    compute_arc_layout,
    compute_layout,
)
from satlayout.layout.types import (
    Point2D,
    Direction,
    ArcWinding,
    StraightLayoutSpec,
    ArcLayoutSpec,
)
from satlayout.geometry import distance


def coords(points):
    """Flatten points to [x0, y0, x1, y1, ...] for pytest.approx"""
    return [c for p in points for c in (p.x, p.y)]


def straight(direction=Direction.RIGHT, count=3, center=None, spacing=10.0,
             primary_size=50.0, satellite_size=40.0):
    return StraightLayoutSpec(
        direction=direction,
        spacing=spacing,
        primary_size=primary_size,
        satellite_size=satellite_size,
        count=count,
        center=center or Point2D(0.0, 0.0),
    )


def arc(count=3, start=0.0, end=math.pi, radius=100.0, center=None,
        winding=ArcWinding.CLOCKWISE):
    return ArcLayoutSpec(
        start_angle_rad=start,
        end_angle_rad=end,
        radius=radius,
        count=count,
        center=center or Point2D(0.0, 0.0),
        winding=winding,
    )


@pytest.mark.unit
class TestStraightLayout:
    """Tests for compute_straight_layout"""

    @pytest.mark.parametrize("direction", list(Direction))
    def test_zero_count_is_empty(self, direction):
        """No satellites requested gives no positions in any direction"""
        assert compute_straight_layout(straight(direction=direction, count=0)) == []

    def test_right(self):
        """Step is (50 + 40) / 2 + 10 = 55 along +x"""
        points = compute_straight_layout(straight(Direction.RIGHT, count=3))
        assert coords(points) == pytest.approx([55, 0, 110, 0, 165, 0])

    def test_bottom_from_offset_center(self):
        """Bottom steps along +y from the given center"""
        points = compute_straight_layout(straight(Direction.BOTTOM, count=2, center=Point2D(5, 5)))
        assert coords(points) == pytest.approx([5, 60, 5, 115])

    def test_left(self):
        """Left steps along -x"""
        points = compute_straight_layout(straight(Direction.LEFT, count=2, center=Point2D(200, 50)))
        assert coords(points) == pytest.approx([145, 50, 90, 50])

    def test_top(self):
        """Top steps along -y (screen coordinates)"""
        points = compute_straight_layout(straight(Direction.TOP, count=2, center=Point2D(200, 500)))
        assert coords(points) == pytest.approx([200, 445, 200, 390])

    def test_length_matches_count(self):
        """Exactly `count` positions are returned"""
        assert len(compute_straight_layout(straight(count=7))) == 7

    def test_arithmetic_progression(self):
        """Consecutive positions differ by exactly one step"""
        spec = straight(Direction.BOTTOM, count=5, spacing=3.5, primary_size=56, satellite_size=44)
        points = compute_straight_layout(spec)
        gaps = [b.y - a.y for a, b in zip(points, points[1:])]
        assert gaps == pytest.approx([spec.step] * 4)
        assert points[0].y == pytest.approx(spec.step)

    def test_zero_step_stays_at_center(self):
        """Zero sizes and spacing put every satellite on the center"""
        center = Point2D(12, 34)
        points = compute_straight_layout(
            straight(count=3, center=center, spacing=0, primary_size=0, satellite_size=0)
        )
        assert points == [center, center, center]

    def test_negative_spacing_reduces_step(self):
        """Negative spacing is accepted and shortens the step"""
        points = compute_straight_layout(straight(Direction.RIGHT, count=2, spacing=-10))
        assert coords(points) == pytest.approx([35, 0, 70, 0])

    def test_accepts_string_direction(self):
        """Direction given by its value behaves like the enum member"""
        spec = StraightLayoutSpec('left', 10.0, 50.0, 40.0, 1, Point2D(0, 0))
        assert coords(compute_straight_layout(spec)) == pytest.approx([-55, 0])

    def test_idempotent(self):
        """Same input, same output"""
        spec = straight(Direction.TOP, count=4, spacing=7.25)
        assert compute_straight_layout(spec) == compute_straight_layout(spec)


@pytest.mark.unit
class TestArcLayout:
    """Tests for compute_arc_layout"""

    def test_zero_count_is_empty(self):
        """No satellites requested gives no positions"""
        assert compute_arc_layout(arc(count=0)) == []

    @pytest.mark.parametrize("start", [0.0, math.pi / 3, -2.0, 5 * math.pi / 4])
    def test_single_satellite_at_start_angle(self, start):
        """One satellite sits at the start angle without dividing by zero"""
        center = Point2D(10, 20)
        points = compute_arc_layout(arc(count=1, start=start, end=start + 1.0, radius=80, center=center))

        assert len(points) == 1
        assert math.isfinite(points[0].x) and math.isfinite(points[0].y)
        assert points[0].x == pytest.approx(10 + 80 * math.cos(start))
        assert points[0].y == pytest.approx(20 + 80 * math.sin(start))

    def test_single_satellite_ignores_winding(self):
        """Winding has nothing to act on with a single satellite"""
        cw = compute_arc_layout(arc(count=1, start=1.0, winding=ArcWinding.CLOCKWISE))
        ccw = compute_arc_layout(arc(count=1, start=1.0, winding=ArcWinding.COUNTER_CLOCKWISE))
        assert cw == ccw

    def test_half_circle_clockwise(self):
        """0 to pi clockwise visits 0, pi/2, pi"""
        points = compute_arc_layout(arc(count=3))
        assert coords(points) == pytest.approx([100, 0, 0, 100, -100, 0], abs=1e-6)

    def test_half_circle_counterclockwise(self):
        """Counterclockwise negates the increments: 0, -pi/2, -pi"""
        points = compute_arc_layout(arc(count=3, winding=ArcWinding.COUNTER_CLOCKWISE))
        assert coords(points) == pytest.approx([100, 0, 0, -100, -100, 0], abs=1e-6)

    def test_first_point_at_start_angle(self):
        """Placement starts at the start angle for any count"""
        points = compute_arc_layout(arc(count=5, start=math.pi, end=3 * math.pi / 2, radius=50))
        assert coords(points[:1]) == pytest.approx([-50, 0], abs=1e-6)

    def test_even_angular_spacing(self):
        """Angles increase by (end - start) / (count - 1)"""
        center = Point2D(0, 0)
        points = compute_arc_layout(arc(count=4, start=0.0, end=math.pi / 2, radius=1.0))
        angles = [math.atan2(p.y - center.y, p.x - center.x) for p in points]
        assert angles == pytest.approx([0, math.pi / 6, math.pi / 3, math.pi / 2], abs=1e-9)

    def test_equal_angles_coincide(self):
        """Start equal to end puts every satellite on the same spot"""
        points = compute_arc_layout(arc(count=4, start=1.2, end=1.2, radius=30))
        assert all(p == points[0] for p in points)

    def test_negative_radius_mirrors_through_center(self):
        """Negative radius is accepted and mirrors positions"""
        points = compute_arc_layout(arc(count=2, start=0.0, end=math.pi / 2, radius=-100,
                                        center=Point2D(50, 50)))
        assert coords(points) == pytest.approx([-50, 50, 50, -50], abs=1e-6)

    @pytest.mark.parametrize("count,radius,winding", [
        (2, 100.0, ArcWinding.CLOCKWISE),
        (5, 37.5, ArcWinding.COUNTER_CLOCKWISE),
        (9, -60.0, ArcWinding.CLOCKWISE),
        (12, 0.0, ArcWinding.COUNTER_CLOCKWISE),
    ])
    def test_points_on_circle(self, count, radius, winding):
        """Every satellite lies |radius| away from the center"""
        center = Point2D(-20, 340)
        points = compute_arc_layout(arc(count=count, start=0.3, end=4.1, radius=radius,
                                        center=center, winding=winding))
        assert len(points) == count
        for point in points:
            assert distance(point, center) == pytest.approx(abs(radius), abs=1e-6)

    def test_accepts_string_winding(self):
        """Winding given by its value behaves like the enum member"""
        spec = ArcLayoutSpec(0.0, math.pi, 100.0, 3, Point2D(0, 0), 'counterclockwise')
        assert coords(compute_arc_layout(spec)) == pytest.approx([100, 0, 0, -100, -100, 0], abs=1e-6)

    def test_returns_python_floats(self):
        """Coordinates are plain floats, not numpy scalars"""
        point = compute_arc_layout(arc(count=2))[1]
        assert type(point.x) is float and type(point.y) is float

    def test_idempotent(self):
        """Same input, same output"""
        spec = arc(count=6, start=0.5, end=2.5, radius=75, winding=ArcWinding.COUNTER_CLOCKWISE)
        assert compute_arc_layout(spec) == compute_arc_layout(spec)


@pytest.mark.unit
class TestComputeLayout:
    """Tests for compute_layout dispatch"""

    def test_straight_spec(self):
        spec = straight(count=2)
        assert compute_layout(spec) == compute_straight_layout(spec)

    def test_arc_spec(self):
        spec = arc(count=4)
        assert compute_layout(spec) == compute_arc_layout(spec)

    def test_unknown_spec_type(self):
        """Anything but a layout spec is a programming error"""
        with pytest.raises(TypeError, match="Unsupported layout spec"):
            compute_layout({'count': 3})
