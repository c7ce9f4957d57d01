from algokit.half_plane import HalfPlane, Point, half_plane_intersection, intersect


def _square():
    pts = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
    return [HalfPlane(pts[i], pts[(i + 1) % 4]) for i in range(4)]


def _area(poly):
    return sum(poly[i].cross(poly[(i + 1) % len(poly)]) for i in range(len(poly))) / 2


def test_unit_square():
    poly = half_plane_intersection(_square())
    assert len(poly) == 4
    assert abs(_area(poly) - 1) < 1e-6
    for corner in [(0, 0), (1, 0), (1, 1), (0, 1)]:
        assert any(abs(p.x - corner[0]) < 1e-6 and abs(p.y - corner[1]) < 1e-6 for p in poly)


def test_empty_intersection():
    planes = _square() + [HalfPlane(Point(5, 5), Point(4, 5))]
    planes.append(HalfPlane(Point(0, 3), Point(1, 3)))
    assert half_plane_intersection([HalfPlane(Point(0, 0), Point(1, 0)),
                                    HalfPlane(Point(0, -1), Point(-1, -1))]) == []


def test_out():
    h = HalfPlane(Point(0, 0), Point(1, 0))
    assert h.out(Point(0, -1))
    assert not h.out(Point(0, 1))


def test_intersect_lines():
    p = intersect(HalfPlane(Point(0, 0), Point(1, 1)), HalfPlane(Point(0, 2), Point(1, 1)))
    assert abs(p.x - 1) < 1e-12 and abs(p.y - 1) < 1e-12


def test_input_not_extended():
    planes = _square()
    half_plane_intersection(planes)
    assert len(planes) == 4