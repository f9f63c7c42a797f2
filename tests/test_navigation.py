import pytest

from mineopoly.actions import TurnAction
from mineopoly.exceptions import InvalidBoardSizeError, InvalidCoordinateError
from mineopoly.items import InventoryItem
from mineopoly.navigation import (
    adjacent_points,
    adjacent_tile_types,
    apply_path,
    blocked_adjacent_point,
    can_pick_up_here,
    find_nearest_market,
    is_adjacent_to_any,
    is_minable_tile,
    market_locations,
    path_to,
    sort_by_path_distance,
    step_toward_any,
)
from mineopoly.tiles import Coordinate, ResourceType, TileType
from mineopoly.view import BoardSnapshot


class TestAdjacentPoints:
    """Tests for neighbour lookup."""

    def test_fixed_order(self):
        """Test the [up, down, left, right] order."""
        assert adjacent_points(Coordinate(3, 5)) == [(4, 5), (2, 5), (3, 4), (3, 6)]

    @pytest.mark.parametrize("point", [(0, 0), (7, 2), (19, 19)])
    def test_four_distinct_unit_steps(self, point):
        """Test that each neighbour differs by one step on exactly one axis."""
        neighbours = adjacent_points(point)

        assert len(set(neighbours)) == 4
        for neighbour in neighbours:
            dx, dy = abs(neighbour.x - point[0]), abs(neighbour.y - point[1])
            assert (dx, dy) in ((1, 0), (0, 1))

    def test_none_rejected(self):
        """Test that a missing coordinate fails fast."""
        with pytest.raises(InvalidCoordinateError):
            adjacent_points(None)

    def test_tile_types_off_board_are_none(self, generated_board):
        """Test that neighbours past the edge report no tile."""
        view = BoardSnapshot(generated_board, (0, 0), (19, 19))
        types = adjacent_tile_types(view, Coordinate(0, 0))

        assert types[0] == generated_board.get_tile_type((1, 0))
        assert types[1] is None
        assert types[2] is None
        assert types[3] == generated_board.get_tile_type((0, 1))


class TestPathTo:
    """Tests for the canonical Manhattan path."""

    def test_horizontal_then_vertical(self):
        """Test a short path left and down."""
        path = path_to(Coordinate(4, 7), Coordinate(2, 6))
        assert path == [TurnAction.MOVE_LEFT, TurnAction.MOVE_LEFT, TurnAction.MOVE_DOWN]

    def test_same_point_is_empty(self):
        """Test that no moves are needed to stay put."""
        assert path_to(Coordinate(5, 5), Coordinate(5, 5)) == []

    @pytest.mark.parametrize(
        "start,destination",
        [((0, 0), (5, 3)), ((9, 9), (2, 14)), ((12, 4), (12, 0)), ((3, 8), (0, 8)), ((6, 1), (10, 19))],
    )
    def test_path_properties(self, start, destination):
        """Test length, ordering and endpoint of the path."""
        path = path_to(Coordinate(*start), Coordinate(*destination))
        horizontal = {TurnAction.MOVE_LEFT, TurnAction.MOVE_RIGHT}

        manhattan = abs(destination[0] - start[0]) + abs(destination[1] - start[1])
        assert len(path) == manhattan

        kinds = [action in horizontal for action in path]
        assert kinds == sorted(kinds, reverse=True)

        assert apply_path(Coordinate(*start), path) == destination

    def test_negative_coordinate_rejected(self):
        """Test that negative coordinates are not clamped."""
        with pytest.raises(InvalidCoordinateError):
            path_to(Coordinate(-1, 0), Coordinate(2, 2))

    def test_none_rejected(self):
        """Test that a missing destination fails fast."""
        with pytest.raises(InvalidCoordinateError):
            path_to(Coordinate(1, 1), None)

    def test_apply_path_ignores_non_movement(self):
        """Test that MINE, PICK_UP and IDLE do not move the player."""
        actions = [TurnAction.MINE, TurnAction.MOVE_UP, TurnAction.PICK_UP, TurnAction.IDLE]
        assert apply_path(Coordinate(2, 2), actions) == (2, 3)


class TestFindNearestMarket:
    """Tests for the quadrant-based market choice."""

    def test_red_upper(self):
        """Test that red above its upper market goes to the upper market."""
        assert find_nearest_market(Coordinate(11, 11), True, 10) == (10, 10)

    def test_red_lower(self):
        """Test that red strictly below and left goes to the lower market."""
        assert find_nearest_market(Coordinate(9, 7), True, 10) == (9, 9)

    def test_red_strict_comparison(self):
        """Test that sharing the upper market's column picks the upper market."""
        assert find_nearest_market(Coordinate(10, 5), True, 10) == (10, 10)

    @pytest.mark.parametrize(
        "location,expected",
        [((9, 10), (9, 10)), ((0, 19), (9, 10)), ((10, 10), (10, 9)), ((0, 9), (10, 9)), ((15, 2), (10, 9))],
    )
    def test_blue_quadrants(self, location, expected):
        """Test blue's inclusive comparisons."""
        assert find_nearest_market(Coordinate(*location), False, 10) == expected

    def test_small_half_board_rejected(self):
        """Test that a half size below 5 fails fast."""
        with pytest.raises(InvalidBoardSizeError):
            find_nearest_market(Coordinate(1, 1), True, 4)

    def test_market_locations(self):
        """Test the four market roles."""
        markets = market_locations(5)
        assert markets.red_lower == (4, 4)
        assert markets.red_upper == (5, 5)
        assert markets.blue_lower == (5, 4)
        assert markets.blue_upper == (4, 5)


class TestSortByPathDistance:
    """Tests for the stable distance bucket sort."""

    def test_sorted_with_stable_ties(self):
        """Test ascending distance with ties in input order."""
        points = [Coordinate(1, 3), Coordinate(5, 1), Coordinate(3, 2), Coordinate(2, 3)]
        expected = [(1, 3), (3, 2), (2, 3), (5, 1)]

        assert sort_by_path_distance(points, Coordinate(0, 0)) == expected

    def test_tie_order_follows_input(self):
        """Test that reversing tied points reverses their output order."""
        points = [Coordinate(2, 3), Coordinate(3, 2)]
        assert sort_by_path_distance(points, Coordinate(0, 0)) == [(2, 3), (3, 2)]

    def test_empty(self):
        """Test that no points sort to no points."""
        assert sort_by_path_distance([], Coordinate(0, 0)) == []


class TestPredicates:
    """Tests for membership helpers."""

    def test_is_adjacent_to_any(self):
        """Test detection of an item among the given points."""
        with_item = [Coordinate(1, 3), Coordinate(5, 1), Coordinate(3, 2)]
        without_item = [Coordinate(1, 3), Coordinate(6, 1), Coordinate(3, 2)]
        items = [Coordinate(5, 1)]

        assert is_adjacent_to_any(with_item, items)
        assert not is_adjacent_to_any(without_item, items)
        assert not is_adjacent_to_any(with_item, [])
        assert not is_adjacent_to_any(with_item, None)

    def test_can_pick_up_here(self):
        """Test that only tiles holding an item can be picked up from."""
        items = {
            InventoryItem(ResourceType.DIAMOND): Coordinate(1, 3),
            InventoryItem(ResourceType.EMERALD): Coordinate(3, 5),
        }
        assert can_pick_up_here(Coordinate(1, 3), items)
        assert not can_pick_up_here(Coordinate(2, 4), items)

    @pytest.mark.parametrize(
        "tile_type,expected",
        [
            (TileType.RESOURCE_RUBY, True),
            (TileType.RESOURCE_EMERALD, True),
            (TileType.RESOURCE_DIAMOND, True),
            (TileType.RED_MARKET, False),
            (TileType.BLUE_MARKET, False),
            (TileType.EMPTY, False),
            (None, False),
        ],
    )
    def test_is_minable_tile(self, tile_type, expected):
        """Test that only deposits are minable."""
        assert is_minable_tile(tile_type) is expected

    def test_blocked_adjacent_point(self):
        """Test detection of the other player next to us."""
        other = Coordinate(3, 4)

        assert blocked_adjacent_point(adjacent_points(Coordinate(3, 3)), other) == other
        assert blocked_adjacent_point(adjacent_points(Coordinate(4, 1)), other) is None
        assert blocked_adjacent_point(adjacent_points(Coordinate(3, 3)), None) is None


class TestStepTowardAny:
    """Tests for stepping onto an adjacent target."""

    def test_moves_onto_target(self):
        """Test the move is derived from the path to the target."""
        assert step_toward_any(Coordinate(5, 5), [Coordinate(5, 6)]) == TurnAction.MOVE_UP
        assert step_toward_any(Coordinate(5, 5), [Coordinate(4, 5)]) == TurnAction.MOVE_LEFT

    def test_first_in_adjacency_order(self):
        """Test that ties go to the earlier neighbour."""
        targets = [Coordinate(5, 4), Coordinate(6, 5)]
        assert step_toward_any(Coordinate(5, 5), targets) == TurnAction.MOVE_RIGHT

    def test_blocked_target_skipped(self):
        """Test that the opponent's tile is never chosen."""
        target = Coordinate(5, 6)
        assert step_toward_any(Coordinate(5, 5), [target], blocked=target) is None

    def test_no_adjacent_target(self):
        """Test that far targets yield no move."""
        assert step_toward_any(Coordinate(5, 5), [Coordinate(9, 9)]) is None
