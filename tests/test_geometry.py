import itertools
import math

import pytest

from uvasolve.geometry import (
    Rectangle,
    box_cuts,
    clock_angle,
    containing_figures,
    cube_overlap,
    fourth_vertex,
    is_box,
    problems,
    satellite_distances,
    shaded_areas,
    solve,
)


def test_rectangle_contains_strict_interior():
    rect = Rectangle(0.0, 10.0, 10.0, 0.0)
    assert rect.contains(5.0, 5.0)
    assert not rect.contains(0.0, 5.0)
    assert not rect.contains(5.0, 10.0)
    assert not rect.contains(11.0, 5.0)


def test_containing_figures_numbers_from_one():
    rects = [Rectangle(0, 10, 10, 0), Rectangle(5, 15, 15, 5), Rectangle(20, 30, 30, 20)]
    assert containing_figures(7, 7, rects) == [1, 2]
    assert containing_figures(1, 1, rects) == [1]
    assert containing_figures(50, 50, rects) == []


@pytest.mark.parametrize("a", [0.1, 1.0, 2.5, 10.0])
def test_shaded_areas_fill_the_square(a):
    center, dotted, grid = shaded_areas(a)
    assert center + dotted + grid == pytest.approx(a * a)
    assert center > 0 and dotted > 0 and grid > 0


def test_shaded_areas_scale_quadratically():
    small = shaded_areas(1.5)
    large = shaded_areas(3.0)
    for s, l in zip(small, large):
        assert l == pytest.approx(4 * s)


@pytest.mark.parametrize("length,width", [(10.0, 7.0), (5.0, 5.0), (3.0, 12.0)])
def test_box_cuts_maximise_volume(length, width):
    max_x, zero, min_x = box_cuts(length, width)
    assert zero == 0.0
    assert min_x == min(length, width) / 2

    def volume(x):
        return x * (length - 2 * x) * (width - 2 * x)

    assert 0 < max_x < min_x
    assert volume(max_x) >= volume(max_x - 1e-4)
    assert volume(max_x) >= volume(max_x + 1e-4)


def test_satellite_half_turn():
    arc, chord = satellite_distances(0.0, 180.0, "deg")
    assert arc == pytest.approx(math.pi * 6440.0)
    assert chord == pytest.approx(2 * 6440.0)


def test_satellite_units_and_wrapping():
    assert satellite_distances(100.0, 5400.0, "min") == pytest.approx(
        satellite_distances(100.0, 90.0, "deg")
    )
    assert satellite_distances(100.0, 270.0, "deg") == pytest.approx(
        satellite_distances(100.0, 90.0, "deg")
    )
    assert satellite_distances(100.0, 540.0, "deg") == pytest.approx(
        satellite_distances(100.0, 180.0, "deg")
    )
    arc, chord = satellite_distances(50.0, 0.0, "deg")
    assert arc == 0.0 and chord == 0.0


def test_satellite_chord_shorter_than_arc():
    arc, chord = satellite_distances(500.0, 73.0, "deg")
    assert 0 < chord < arc


def test_fourth_vertex_any_ordering():
    shared, p, q = (1.0, 2.0), (4.0, 3.0), (2.0, 6.0)
    results = {
        fourth_vertex(p, shared, shared, q),
        fourth_vertex(shared, p, shared, q),
        fourth_vertex(shared, p, q, shared),
        fourth_vertex(p, shared, q, shared),
    }
    assert len(results) == 1
    (fx, fy), = results
    assert (fx + shared[0], fy + shared[1]) == pytest.approx((p[0] + q[0], p[1] + q[1]))


def test_clock_angle():
    assert clock_angle(3, 0) == 90
    assert clock_angle(6, 0) == 180
    for h in range(1, 13):
        for m in range(0, 60, 7):
            assert 0 <= clock_angle(h, m) <= 180


def test_cube_overlap():
    assert cube_overlap([(1, 2, 3, 4)]) == 4 ** 3
    assert cube_overlap([(0, 0, 0, 5), (0, 0, 0, 5)]) == cube_overlap([(0, 0, 0, 5)])
    assert cube_overlap([(0, 0, 0, 2), (10, 10, 10, 2)]) == 0
    assert cube_overlap([(0, 0, 0, 4), (-3, -3, -3, 4)]) == 1


def test_cube_overlap_empty_raises():
    with pytest.raises(ValueError):
        cube_overlap([])


def test_is_box_accepts_any_face_order():
    faces = [(2, 3), (3, 2), (2, 4), (4, 2), (3, 4), (4, 3)]
    for order in itertools.islice(itertools.permutations(faces), 50):
        assert is_box(order)


def test_is_box_rejects_mismatch():
    assert not is_box([(2, 3), (2, 3), (2, 4), (2, 4), (3, 5), (3, 5)])
    assert not is_box([(1, 1), (1, 1), (1, 1), (1, 1), (1, 1), (1, 2)])


def test_is_box_needs_six_faces():
    with pytest.raises(ValueError):
        is_box([(1, 1)] * 5)


def test_solve_rectangles():
    text = (
        "r 0.0 10.0 10.0 0.0\nr 5.0 15.0 15.0 5.0\n*\n"
        "7.0 7.0\n20.0 20.0\n1.0 1.0\n9999.9 9999.9\n"
    )
    assert solve("476", text) == (
        "Point 1 is contained in figure 1\n"
        "Point 1 is contained in figure 2\n"
        "Point 2 is not contained in any figure\n"
        "Point 3 is contained in figure 1\n"
    )


def test_solve_boxes():
    text = "2 3 3 2 2 4 4 2 3 4 4 3\n1 1 1 1 1 1 1 1 1 1 1 2\n"
    assert solve("1587", text) == "POSSIBLE\nIMPOSSIBLE\n"


def test_solve_clock_stops_at_zero():
    assert solve("579", "3:00\n0:00\n6:00\n") == f"{clock_angle(3, 0):.3f}\n"


def test_solve_cubes_and_box_cuts():
    assert solve("737", "1\n0 0 0 3\n0\n") == f"{cube_overlap([(0, 0, 0, 3)])}\n"
    line = solve("10215", "10 7\n").split()
    assert line[1] == "0.000"
    assert len(line) == 3


def test_solve_unknown_problem():
    with pytest.raises(ValueError):
        solve("1", "")


def test_problems_listed():
    assert set(problems()) == {"10209", "10215", "10221", "10242", "1587", "476", "579", "737"}