import pytest
from dashgrid.area import Area, index_from_cell, cell_from_index, values_from_rectangle

@pytest.fixture
def top_half() -> Area:
    return Area.from_values(4, 4, [
        1, 1, 1, 1,
        1, 1, 1, 1,
        0, 0, 0, 0,
        0, 0, 0, 0
    ])

@pytest.fixture
def top_left() -> Area:
    return Area.from_values(4, 4, [
        1, 1, 0, 0,
        1, 1, 0, 0,
        0, 0, 0, 0,
        0, 0, 0, 0
    ])

def test_index_from_cell():
    assert index_from_cell(4, 4, 3, 2) == 6

def test_cell_from_index():
    assert cell_from_index(4, 4, 5) == (2, 2)

def test_index_mapping_round_trip_on_non_square_grid():
    """Map and inverse map agree on every cell, whatever the grid shape."""
    rows, columns = 2, 3
    for i in range(rows * columns):
        x, y = cell_from_index(rows, columns, i)
        assert 1 <= x <= columns and 1 <= y <= rows
        assert index_from_cell(rows, columns, x, y) == i

def test_values_from_rectangle():
    values = values_from_rectangle(4, 4, x=2, y=3, dx=3, dy=2)
    assert [int(v) for v in values] == [
        0, 0, 0, 0,
        0, 0, 0, 0,
        0, 1, 1, 1,
        0, 1, 1, 1
    ]

def test_from_rectangle_is_clipped_to_the_grid():
    area = Area.from_rectangle(3, 3, x=2, y=2, dx=5, dy=5)
    assert list(area) == [(2, 2), (3, 2), (2, 3), (3, 3)]
    assert len(area) == 4

def test_from_rectangle_on_non_square_grid():
    area = Area.from_rectangle(2, 3, x=2, y=1, dx=2, dy=2)
    assert area.values == (
        0, 1, 1,
        0, 1, 1
    )
    assert list(area) == [(2, 1), (3, 1), (2, 2), (3, 2)]

def test_rectangle_round_trip():
    """Iterating a rectangle yields exactly its dx*dy cells, row by row."""
    area = Area.from_rectangle(5, 5, x=2, y=3, dx=3, dy=2)
    expected = [(x, y) for y in range(3, 5) for x in range(2, 5)]
    assert list(area) == expected

def test_iteration_is_restartable(top_left):
    assert list(top_left) == list(top_left) == [(1, 1), (2, 1), (1, 2), (2, 2)]

def test_empty_area():
    area = Area.empty(3, 3)
    assert len(area) == 0
    assert list(area) == []
    assert Area.from_rectangle(3, 3, dx=0, dy=0) == area

def test_intersection(top_half, top_left):
    assert top_half.intersection(top_left) == top_left.intersection(top_half), "intersection should be commutative"
    assert top_half.intersection(top_left).values == top_left.values
    assert (top_half & top_left) == top_left

def test_union(top_half):
    a2 = Area.from_values(4, 4, [
        1, 1, 0, 0,
        1, 1, 0, 0,
        1, 1, 0, 0,
        0, 0, 0, 0
    ])
    assert top_half.union(a2) == a2.union(top_half), "union should be commutative"
    assert (top_half | a2).values == (
        1, 1, 1, 1,
        1, 1, 1, 1,
        1, 1, 0, 0,
        0, 0, 0, 0
    )

def test_complement_is_an_involution(top_half):
    assert top_half.complement().complement() == top_half
    assert len(~top_half) == 8
    assert top_half.intersection(~top_half) == Area.empty(4, 4)

def test_includes(top_half, top_left):
    assert top_half.includes(top_left)
    assert top_half.includes(top_half)
    middle = Area.from_values(4, 4, [
        0, 0, 0, 0,
        1, 1, 1, 0,
        1, 1, 1, 0,
        0, 0, 0, 0
    ])
    assert not middle.includes(top_left)

def test_includes_empty_area_is_vacuously_true(top_left):
    assert top_left.includes(Area.empty(4, 4))
    assert Area.empty(4, 4).includes(Area.empty(4, 4))

def test_is_included(top_left):
    wider = Area.from_rectangle(4, 4, dx=3, dy=2)
    assert top_left.is_included(wider)
    assert not wider.is_included(top_left)

def test_areas_are_immutable(top_left):
    with pytest.raises(ValueError):
        top_left.mask[0] = False
    top_left.union(~top_left)
    assert len(top_left) == 4

def test_equality_and_hash():
    a = Area.from_rectangle(3, 3, 1, 1, 2, 2)
    b = Area.from_values(3, 3, [1, 1, 0, 1, 1, 0, 0, 0, 0])
    assert a == b
    assert hash(a) == hash(b)
    assert a != Area.from_rectangle(3, 3, 1, 1, 2, 1)

def test_different_universes_cannot_be_combined():
    with pytest.raises(ValueError):
        Area.from_rectangle(2, 2).union(Area.from_rectangle(3, 3))
    with pytest.raises(ValueError):
        Area.from_rectangle(2, 2).includes(Area.from_rectangle(2, 3))

def test_wrong_mask_length_is_rejected():
    with pytest.raises(ValueError):
        Area.from_values(2, 2, [1, 0, 1])

def test_contains():
    area = Area.from_rectangle(3, 3, 2, 2)
    assert (2, 2) in area
    assert (1, 1) not in area
    assert (9, 9) not in area

def test_debug_renders_one_line_per_row():
    area = Area.from_rectangle(2, 3, x=3, y=2)
    assert area.debug() == "0 0 0\n0 0 1"
