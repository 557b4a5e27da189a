import heapq
import itertools
from typing import List, NamedTuple, Optional, Tuple

from board import Board, Cell, Location

# Anything priced at or above this was never reached by a real path
REACHABLE_PRICE = 10000


class PathPlan(NamedTuple):
    food: Optional[Location]
    target: Optional[Location]


def plan_paths(board: Board, head: Location) -> PathPlan:
    """Cheapest paths from our head to the nearest food and the nearest target.

    Weighted search over the board: every cell reached gets its price, previous
    location and arrival direction written in place. Stops as soon as both a food
    and a target have been popped, otherwise runs until the queue is empty.
    """
    counter = itertools.count()
    queue: List[Tuple[int, int, Location]] = [(0, next(counter), head)]

    nearest_food = None
    nearest_target = None

    while queue:
        price, _, location = heapq.heappop(queue)

        if location != head:
            current = board.cells[location]
            if price != current.price:
                # Stale entry, a cheaper path was found after this was queued
                continue
            if current.food and nearest_food is None:
                nearest_food = location
            if current.target and nearest_target is None:
                nearest_target = location
            if nearest_food is not None and nearest_target is not None:
                return PathPlan(nearest_food, nearest_target)

        for direction, next_location, next_cell in board.neighbours(location):
            candidate = price + next_cell.cost
            if candidate < next_cell.price:
                next_cell.price = candidate
                next_cell.previous = location
                next_cell.direction = direction
                heapq.heappush(queue, (candidate, next(counter), next_location))

    return PathPlan(nearest_food, nearest_target)


def plan_furthest_path(board: Board) -> Optional[Location]:
    """The reachable cell with the highest price, used to stall for time"""
    reached = [
        (cell.price, location) for location, cell in board.cells.items()
        if cell.price < REACHABLE_PRICE
    ]
    if not reached:
        return None
    return max(reached, key=lambda entry: entry[0])[1]


def get_next_step(board: Board, destination: Location, head: Location) -> Cell:
    """Walk back from destination to the first step taken from the head"""
    current = board.cells[destination]
    while current.previous != head:
        current = board.cells[current.previous]
    return current


def path_to(board: Board, destination: Location, head: Location) -> List[Location]:
    """Locations from the first step to destination, in travel order"""
    path = [destination]
    current = board.cells[destination]
    while current.previous != head:
        path.append(current.previous)
        current = board.cells[current.previous]
    path.reverse()
    return path
