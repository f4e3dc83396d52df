import pytest

from snakeserver.dot import Dot
from snakeserver.location import Location
from snakeserver.rect import Rect


def test_location():
    rect = Rect(0, 0, 1, 5)
    assert rect.location() == Location(Dot(0, y) for y in range(5))


@pytest.mark.parametrize(
    "rect, expected",
    [
        (Rect(0, 0, 1, 5), [Dot(0, 0), Dot(0, 1), Dot(0, 2), Dot(0, 3), Dot(0, 4)]),
        (Rect(0, 0, 5, 1), [Dot(0, 0), Dot(1, 0), Dot(2, 0), Dot(3, 0), Dot(4, 0)]),
        (Rect(5, 5, 5, 1), [Dot(5, 5), Dot(6, 5), Dot(7, 5), Dot(8, 5), Dot(9, 5)]),
        (Rect(5, 5, 1, 5), [Dot(5, 5), Dot(5, 6), Dot(5, 7), Dot(5, 8), Dot(5, 9)]),
        (
            Rect(5, 5, 3, 3),
            [
                Dot(5, 5), Dot(6, 5), Dot(7, 5),
                Dot(5, 6), Dot(6, 6), Dot(7, 6),
                Dot(5, 7), Dot(6, 7), Dot(7, 7),
            ],
        ),
    ],
)
def test_dot_by_index(rect, expected):
    assert [rect.dot(i) for i in range(len(expected))] == expected


@pytest.mark.parametrize(
    "rect, expected",
    [
        (Rect(), "[0,0,0,0]"),
        (Rect(1, 2, 3, 4), "[1,2,3,4]"),
        (Rect(4, 3, 2, 1), "[4,3,2,1]"),
        (Rect(255, 200, 160, 100), "[255,200,160,100]"),
        (Rect(255, 200, 160, 255), "[255,200,160,255]"),
    ],
)
def test_to_json(rect, expected):
    assert rect.to_json() == expected


def test_dots():
    assert Rect(213, 231, 10, 3).dots() == [
        Dot(x, y) for y in (231, 232, 233) for x in range(213, 223)
    ]
    assert Rect(23, 32, 3, 3).dots() == [
        Dot(23, 32), Dot(24, 32), Dot(25, 32),
        Dot(23, 33), Dot(24, 33), Dot(25, 33),
        Dot(23, 34), Dot(24, 34), Dot(25, 34),
    ]
    assert Rect(123, 132, 1, 1).dots() == [Dot(123, 132)]
    assert Rect(22, 3, 0, 233).dots() == []
    assert Rect(22, 3, 123, 0).dots() == []
    assert Rect(22, 3, 0, 0).dots() == []


def test_dot_count():
    assert Rect(0, 0, 10, 3).dot_count() == 30
    assert Rect(0, 0, 0, 233).dot_count() == 0


@pytest.mark.parametrize(
    "rect, dot, expected",
    [
        (Rect(0, 0, 100, 100), Dot(20, 21), True),
        (Rect(0, 0, 100, 100), Dot(200, 21), False),
        (Rect(1, 1, 100, 100), Dot(0, 0), False),
        (Rect(1, 46, 123, 45), Dot(0, 0), False),
        (Rect(33, 46, 123, 45), Dot(43, 65), True),
        (Rect(123, 123, 2, 2), Dot(123, 123), True),
        (Rect(123, 123, 2, 2), Dot(124, 124), True),
        (Rect(123, 123, 2, 1), Dot(124, 124), False),
    ],
)
def test_contains_dot(rect, dot, expected):
    assert rect.contains_dot(dot) is expected


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (Rect(0, 1, 100, 100), Rect(0, 0, 100, 100), False),
        (Rect(1, 1, 100, 100), Rect(1, 1, 100, 100), True),
        (Rect(1, 46, 123, 45), Rect(1, 46, 123, 45), True),
        (Rect(33, 46, 123, 44), Rect(33, 46, 123, 45), False),
        (Rect(), Rect(123, 123, 2, 2), False),
        (Rect(), Rect(), True),
        (Rect(123, 123, 3, 1), Rect(123, 123, 2, 1), False),
    ],
)
def test_equals(first, second, expected):
    assert first.equals(second) is expected
    assert second.equals(first) is expected


@pytest.mark.parametrize(
    "big, small, expected",
    [
        (Rect(0, 1, 100, 100), Rect(0, 0, 100, 100), False),
        (Rect(0, 1, 100, 100), Rect(30, 30, 5, 5), True),
        (Rect(1, 1, 100, 100), Rect(1, 1, 100, 100), True),
        (Rect(1, 46, 123, 45), Rect(20, 55, 30, 12), True),
        (Rect(33, 46, 123, 44), Rect(33, 46, 123, 45), False),
        (Rect(), Rect(123, 123, 2, 2), False),
        (Rect(), Rect(), True),
        (Rect(123, 123, 3, 1), Rect(123, 123, 2, 1), True),
        (Rect(123, 123, 2, 2), Rect(124, 123, 2, 2), False),
        (Rect(123, 123, 2, 2), Rect(122, 123, 2, 2), False),
        (Rect(123, 123, 2, 2), Rect(123, 122, 2, 2), False),
        (Rect(123, 123, 2, 2), Rect(123, 124, 2, 2), False),
    ],
)
def test_contains_rect(big, small, expected):
    assert big.contains_rect(small) is expected