from snakeserver.container import Container


def test_new_container_holds_object():
    container = Container("test123")
    assert container.object == "test123"


def test_get_object_returns_object():
    container = Container("test")
    assert container.get_object() == "test"


def test_containers_compare_by_identity():
    first = Container("same")
    second = Container("same")
    assert first != second
    assert first == first