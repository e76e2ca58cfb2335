import pytest

from mpdlink.geometry import Direction, Geometry, Point

BASE = Geometry(25, 25, 50, 50)


@pytest.mark.parametrize(
    "other, expected",
    [
        (Geometry(0, 0, 25, 10), False),
        (Geometry(75, 0, 25, 10), False),
        (Geometry(0, 25, 10, 25), False),
        (Geometry(0, 75, 10, 25), False),
        (Geometry(25, 0, 50, 10), True),
        (Geometry(25, 75, 50, 10), False),
        (Geometry(0, 75, 25, 10), False),
        (Geometry(75, 75, 25, 10), False),
        (Geometry(0, 0, 100, 10), True),
        (Geometry(0, 0, 26, 10), True),
    ],
)
def test_is_above(other, expected):
    assert other.is_directly_above(BASE) is expected


@pytest.mark.parametrize(
    "other, expected",
    [
        (Geometry(0, 0, 25, 10), False),
        (Geometry(75, 0, 25, 10), False),
        (Geometry(0, 25, 10, 25), False),
        (Geometry(0, 75, 10, 25), False),
        (Geometry(25, 0, 50, 10), False),
        (Geometry(25, 75, 50, 10), True),
        (Geometry(0, 75, 25, 10), False),
        (Geometry(75, 75, 25, 10), False),
        (Geometry(0, 80, 100, 10), True),
        (Geometry(0, 80, 26, 10), True),
    ],
)
def test_is_below(other, expected):
    assert other.is_directly_below(BASE) is expected


@pytest.mark.parametrize(
    "other, expected",
    [
        (Geometry(0, 0, 25, 10), False),
        (Geometry(75, 0, 25, 10), False),
        (Geometry(0, 25, 10, 25), True),
        (Geometry(75, 25, 10, 25), False),
        (Geometry(25, 0, 50, 10), False),
        (Geometry(25, 75, 50, 10), False),
        (Geometry(0, 75, 25, 10), False),
        (Geometry(75, 75, 25, 10), False),
        (Geometry(0, 80, 100, 10), False),
        (Geometry(0, 80, 26, 10), False),
    ],
)
def test_is_left(other, expected):
    assert other.is_directly_left(BASE) is expected


@pytest.mark.parametrize(
    "other, expected",
    [
        (Geometry(0, 0, 25, 10), False),
        (Geometry(75, 0, 25, 10), False),
        (Geometry(0, 25, 10, 25), False),
        (Geometry(75, 25, 10, 25), True),
        (Geometry(25, 0, 50, 10), False),
        (Geometry(25, 75, 50, 10), False),
        (Geometry(0, 75, 25, 10), False),
        (Geometry(75, 75, 25, 10), False),
        (Geometry(0, 80, 100, 10), False),
        (Geometry(0, 80, 26, 10), False),
    ],
)
def test_is_right(other, expected):
    assert other.is_directly_right(BASE) is expected


def test_take_chunk_horizontal():
    area = Geometry(0, 0, 100, 100)

    c1 = area.take_chunk(Direction.HORIZONTAL, 20)
    assert c1 == Geometry(0, 0, 20, 100)
    assert area == Geometry(0, 0, 100, 100, taken_size_horiz=20)

    c2 = area.take_chunk(Direction.HORIZONTAL, 20)
    assert c2 == Geometry(20, 0, 20, 100)
    assert area == Geometry(0, 0, 100, 100, taken_size_horiz=40)

    c3 = area.take_chunk(Direction.HORIZONTAL, 35)
    assert c3 == Geometry(40, 0, 35, 100)
    assert area == Geometry(0, 0, 100, 100, taken_size_horiz=75)

    c4 = area.take_remainder()
    assert c4 == Geometry(75, 0, 25, 100)
    assert area == Geometry(0, 0, 100, 100, taken_size_horiz=100, taken_size_vert=100)


def test_take_chunk_vertical():
    area = Geometry(0, 0, 100, 100)

    c1 = area.take_chunk(Direction.VERTICAL, 20)
    assert c1 == Geometry(0, 0, 100, 20)
    assert area == Geometry(0, 0, 100, 100, taken_size_vert=20)

    c2 = area.take_chunk(Direction.VERTICAL, 20)
    assert c2 == Geometry(0, 20, 100, 20)
    assert area == Geometry(0, 0, 100, 100, taken_size_vert=40)

    c3 = area.take_chunk(Direction.VERTICAL, 35)
    assert c3 == Geometry(0, 40, 100, 35)
    assert area == Geometry(0, 0, 100, 100, taken_size_vert=75)

    c4 = area.take_remainder()
    assert c4 == Geometry(0, 75, 100, 25)
    assert area == Geometry(0, 0, 100, 100, taken_size_horiz=100, taken_size_vert=100)


def test_take_chunk_rounds_down():
    area = Geometry(0, 0, 33, 10)
    assert area.take_chunk(Direction.HORIZONTAL, 50) == Geometry(0, 0, 16, 10)
    assert area.taken_size_horiz == 16


def test_take_chunk_rejects_negative_percent():
    with pytest.raises(ValueError):
        Geometry(0, 0, 10, 10).take_chunk(Direction.VERTICAL, -1)


def test_middle_and_top_left():
    assert BASE.middle() == Point(50, 50)
    assert BASE.top_left() == Point(25, 25)


def test_point_distance():
    assert Point(1, 10).distance(Point(4, 6)) == 7
    assert Point(4, 6).distance(Point(1, 10)) == 7
    assert Point(3, 3).distance(Point(3, 3)) == 0


def test_top_left_dist():
    assert Geometry(0, 0, 5, 5).top_left_dist(BASE) == 50
    assert BASE.top_left_dist(Geometry(0, 0, 5, 5)) == 50