import pytest

from snakeserver.dot import Dot, hash_to_dot


def test_hash_code():
    assert Dot(0xFF, 0xAA).hash_code() == 0xFFAA
    assert Dot(0xAB, 0xCD).hash_code() == 0xABCD
    assert Dot(0, 0).hash_code() == 0


def test_hash_to_dot():
    assert hash_to_dot(0xFFAA) == Dot(0xFF, 0xAA)
    assert hash_to_dot(0xABCD) == Dot(0xAB, 0xCD)
    assert hash_to_dot(0) == Dot(0, 0)


def test_hash_round_trip():
    for dot in [Dot(1, 2), Dot(255, 0), Dot(0, 255), Dot(17, 200)]:
        assert hash_to_dot(dot.hash_code()) == dot


def test_equals_true():
    assert Dot(0, 0).equals(Dot(0, 0))
    assert Dot(1, 1).equals(Dot(1, 1))
    assert Dot(5, 5).equals(Dot(5, 5))
    assert Dot(0xFF, 0xFF).equals(Dot(0xFF, 0xFF))


def test_equals_false():
    assert not Dot(0xFF, 0xFF).equals(Dot(0xFF, 0))
    assert not Dot(0, 0).equals(Dot(0, 1))
    assert not Dot(255, 0).equals(Dot(0, 255))
    assert not Dot(0, 0xFF).equals(Dot(0xFF, 0))


@pytest.mark.parametrize(
    "dot, expected",
    [
        (Dot(10, 10), "[10,10]"),
        (Dot(255, 255), "[255,255]"),
        (Dot(0, 0), "[0,0]"),
        (Dot(0, 1), "[0,1]"),
        (Dot(2, 1), "[2,1]"),
        (Dot(255, 1), "[255,1]"),
        (Dot(255, 100), "[255,100]"),
        (Dot(0, 255), "[0,255]"),
    ],
)
def test_to_json(dot, expected):
    assert dot.to_json() == expected


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (Dot(0, 0), Dot(0, 0), 0),
        (Dot(10, 0), Dot(0, 0), 10),
        (Dot(0, 11), Dot(0, 0), 11),
        (Dot(1, 11), Dot(0, 0), 12),
    ],
)
def test_distance_to(first, second, expected):
    assert first.distance_to(second) == expected
    assert second.distance_to(first) == expected


def test_str():
    assert str(Dot(3, 4)) == "[3, 4]"