import pytest

from linkstruct.stack import Stack


def _filled(*items):
    stack = Stack()
    for item in items:
        stack.push(item)
    return stack


def test_create_is_empty():
    stack = Stack()
    assert stack.is_empty() is True
    assert len(stack) == 0


@pytest.mark.parametrize("items", [([10],), tuple(range(5))])
def test_clear(items):
    stack = _filled(*items)
    assert stack.peek() is items[-1]
    stack.clear()
    assert stack.is_empty() is True
    assert list(stack) == []
    with pytest.raises(IndexError):
        stack.pop()


@pytest.mark.parametrize("operation", [Stack.peek, Stack.pop])
def test_empty_access_raises(operation):
    with pytest.raises(IndexError):
        operation(Stack())


def test_push_and_peek():
    stack = Stack()
    for count, item in enumerate(([1], [2], None), start=1):
        stack.push(item)
        assert stack.peek() is item
        assert len(stack) == count


def test_pop_is_lifo():
    items = ([2], [3], [4])
    stack = _filled(*items)
    for item in reversed(items):
        assert stack.pop() is item
    assert stack.is_empty() is True
    with pytest.raises(IndexError):
        stack.pop()


@pytest.mark.parametrize("item", [[1], None])
def test_pop_single(item):
    stack = _filled(item)
    assert stack.pop() is item
    assert stack.is_empty() is True


def test_is_empty_transitions():
    stack = Stack()
    assert stack.is_empty() is True
    stack.push(1)
    assert stack.is_empty() is False
    stack.pop()
    assert stack.is_empty() is True


def test_iter_top_to_bottom():
    stack = _filled("a", "b", "c")
    assert list(stack) == ["c", "b", "a"]
    assert len(stack) == 3


def test_peek_does_not_remove():
    stack = _filled("x")
    assert [stack.peek(), stack.peek()] == ["x", "x"]
    assert len(stack) == 1