"""
Pure navigation helpers shared by player strategies.

Coordinates use the board convention: (0, 0) is the bottom-left tile,
x grows to the right and y grows upwards.
"""

from collections import defaultdict
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping, NamedTuple, Optional, Sequence

from mineopoly.actions import TurnAction
from mineopoly.exceptions import InvalidBoardSizeError, InvalidCoordinateError
from mineopoly.items import InventoryItem
from mineopoly.tiles import Coordinate, TileType

if TYPE_CHECKING:
    from mineopoly.view import BoardView

MIN_HALF_BOARD_SIZE = 5


class MarketLocations(NamedTuple):
    """The four market tiles around the board center."""

    red_lower: Coordinate
    red_upper: Coordinate
    blue_lower: Coordinate
    blue_upper: Coordinate


def _require_point(point, allow_negative: bool = True) -> Coordinate:
    if point is None:
        raise InvalidCoordinateError("Coordinate is required, got None")
    try:
        x, y = point
    except (TypeError, ValueError):
        raise InvalidCoordinateError(f"Expected an (x, y) pair, got {point!r}") from None
    if not isinstance(x, int) or not isinstance(y, int) or isinstance(x, bool) or isinstance(y, bool):
        raise InvalidCoordinateError(f"Coordinate components must be integers, got {point!r}")
    if not allow_negative and (x < 0 or y < 0):
        raise InvalidCoordinateError(f"Coordinate must not be negative, got {point!r}")
    return Coordinate(x, y)


def adjacent_points(point: Coordinate) -> List[Coordinate]:
    """
    Get the four neighbouring points.

    The order is fixed as [up, down, left, right] and callers rely on it:
    (x+1, y), (x-1, y), (x, y-1), (x, y+1).
    """
    x, y = _require_point(point)
    return [
        Coordinate(x + 1, y),
        Coordinate(x - 1, y),
        Coordinate(x, y - 1),
        Coordinate(x, y + 1),
    ]


def adjacent_tile_types(board_view: "BoardView", point: Coordinate) -> List[Optional[TileType]]:
    """Tile types at adjacent_points(point), None where a neighbour is off the board."""
    return [board_view.tile_type_at(adjacent) for adjacent in adjacent_points(point)]


def path_to(start: Coordinate, destination: Coordinate) -> List[TurnAction]:
    """
    Get the canonical Manhattan path from start to destination.

    All horizontal moves come first, then all vertical moves.
    """
    start = _require_point(start, allow_negative=False)
    destination = _require_point(destination, allow_negative=False)

    horizontal_move = destination.x - start.x
    vertical_move = destination.y - start.y

    horizontal_action = TurnAction.MOVE_LEFT if horizontal_move < 0 else TurnAction.MOVE_RIGHT
    vertical_action = TurnAction.MOVE_DOWN if vertical_move < 0 else TurnAction.MOVE_UP

    return [horizontal_action] * abs(horizontal_move) + [vertical_action] * abs(vertical_move)


def apply_path(start: Coordinate, actions: Iterable[TurnAction]) -> Coordinate:
    """Location reached after applying actions; non-movement actions stay put."""
    x, y = _require_point(start)
    for action in actions:
        if action.is_movement:
            dx, dy = action.delta
            x, y = x + dx, y + dy
    return Coordinate(x, y)


def market_locations(half_board_size: int) -> MarketLocations:
    """Get the market coordinates for a board of size 2 * half_board_size."""
    if half_board_size < MIN_HALF_BOARD_SIZE:
        raise InvalidBoardSizeError(
            f"Half board size must be >= {MIN_HALF_BOARD_SIZE}, got {half_board_size}"
        )
    h = half_board_size
    return MarketLocations(
        red_lower=Coordinate(h - 1, h - 1),
        red_upper=Coordinate(h, h),
        blue_lower=Coordinate(h, h - 1),
        blue_upper=Coordinate(h - 1, h),
    )


def find_nearest_market(location: Coordinate, is_red_player: bool, half_board_size: int) -> Coordinate:
    """
    Pick one of the player's two markets with a quadrant test.

    Red takes its lower market only when strictly below and left of its
    upper market. Blue takes its upper market when at or left of it and
    at or above it.
    """
    location = _require_point(location, allow_negative=False)
    markets = market_locations(half_board_size)

    if is_red_player:
        upper = markets.red_upper
        if location.x < upper.x and location.y < upper.y:
            return markets.red_lower
        return upper

    upper = markets.blue_upper
    if location.x <= upper.x and location.y >= upper.y:
        return upper
    return markets.blue_lower


def sort_by_path_distance(points: Sequence[Coordinate], start: Coordinate) -> List[Coordinate]:
    """
    Order points by path length from start.

    Points at the same distance keep their input order.
    """
    buckets: Dict[int, List[Coordinate]] = defaultdict(list)
    for destination in points:
        buckets[len(path_to(start, destination))].append(destination)

    sorted_points: List[Coordinate] = []
    for distance in sorted(buckets):
        sorted_points.extend(buckets[distance])
    return sorted_points


def is_adjacent_to_any(points: Iterable[Coordinate], targets: Optional[Iterable[Coordinate]]) -> bool:
    """Check if any of points is one of targets."""
    if not targets:
        return False
    target_set = set(targets)
    return any(point in target_set for point in points)


def can_pick_up_here(location: Coordinate, items_on_ground: Mapping[InventoryItem, Coordinate]) -> bool:
    """Check if an item lies on the ground at location."""
    return location in items_on_ground.values()


def is_minable_tile(tile_type: Optional[TileType]) -> bool:
    """Only resource deposits can be mined."""
    return tile_type is not None and tile_type.resource_type is not None


def blocked_adjacent_point(
    adjacent: Sequence[Coordinate], other_player_location: Optional[Coordinate]
) -> Optional[Coordinate]:
    """The other player's location if it is one of the adjacent points."""
    if other_player_location is not None and other_player_location in adjacent:
        return other_player_location
    return None


def step_toward_any(
    location: Coordinate,
    targets: Iterable[Coordinate],
    blocked: Optional[Coordinate] = None,
) -> Optional[TurnAction]:
    """
    Movement action onto the first adjacent target, or None.

    Neighbours are checked in adjacent_points order and the blocked
    point is never chosen.
    """
    target_set = set(targets)
    for adjacent in adjacent_points(location):
        if adjacent == blocked or adjacent not in target_set:
            continue
        if adjacent.x < 0 or adjacent.y < 0:
            continue
        return path_to(location, adjacent)[0]
    return None
