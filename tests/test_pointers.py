from drillings.lessons.pointers import (
    Cons,
    Cow,
    Nil,
    abs_all,
    create_empty_list,
    create_non_empty_list,
)


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    assert create_empty_list() != create_non_empty_list()
    assert create_non_empty_list() == Cons(4, Nil())


def test_reference_mutation():
    data = (-1, 0, 1)
    result = abs_all(Cow.borrowed(data))
    assert result.is_owned is True
    assert list(result) == [1, 0, 1]
    assert data == (-1, 0, 1)


def test_reference_no_mutation():
    data = [0, 1, 2]
    result = abs_all(Cow.borrowed(data))
    assert result.is_owned is False
    assert list(result) == [0, 1, 2]


def test_owned_no_mutation():
    result = abs_all(Cow.owned([0, 1, 2]))
    assert result.is_owned is True
    assert list(result) == [0, 1, 2]


def test_owned_mutation():
    data = [-1, 0, 1]
    result = abs_all(Cow.owned(data))
    assert result.is_owned is True
    assert result.to_mut() is data
    assert data == [1, 0, 1]


def test_borrowed_to_mut_copies():
    data = [5, 6]
    cow = Cow.borrowed(data)
    cow.to_mut().append(7)
    assert data == [5, 6]
    assert list(cow) == [5, 6, 7]
    assert len(cow) == 3
    assert cow[2] == 7