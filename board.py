from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

Location = Tuple[int, int]

# Search sentinels
UNREACHED_PRICE = 99999999
TARGET_PRICE = 99999

# Entry costs
DEFAULT_COST = 1
HAZARD_COST = 15
TUNNEL_COST = 40
HEAD_THREAT_COST = 99999

DIRECTION_VECTORS = {
    'up': (0, 1),
    'down': (0, -1),
    'left': (-1, 0),
    'right': (1, 0),
}


def to_location(point: Dict) -> Location:
    """Convert a Battlesnake {'x': .., 'y': ..} point into a Location"""
    return (point['x'], point['y'])


def neighbour(location: Location, direction: str) -> Location:
    dx, dy = DIRECTION_VECTORS[direction]
    return (location[0] + dx, location[1] + dy)


@dataclass
class Cell:
    """A traversable square and its search state for the current turn"""
    cost: int = DEFAULT_COST
    food: bool = False
    target: bool = False
    price: int = UNREACHED_PRICE
    previous: Optional[Location] = None
    direction: Optional[str] = None


class Board:
    """Traversable cells of one turn, keyed by Location.

    A Location missing from the board is impassable: either off the grid or
    occupied by a snake segment.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells: Dict[Location, Cell] = {}

    @classmethod
    def create(cls, width: int, height: int) -> 'Board':
        board = cls(width, height)
        for x in range(width):
            for y in range(height):
                board.cells[(x, y)] = Cell()
        return board

    def __contains__(self, location: Location) -> bool:
        return location in self.cells

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Location]:
        return iter(self.cells)

    def get(self, location: Location) -> Optional[Cell]:
        return self.cells.get(location)

    def remove(self, location: Location):
        self.cells.pop(location, None)

    def neighbours(self, location: Location) -> Iterator[Tuple[str, Location, Cell]]:
        """Yield (direction, location, cell) for each neighbour present on the board"""
        for direction in DIRECTION_VECTORS:
            next_location = neighbour(location, direction)
            cell = self.cells.get(next_location)
            if cell is not None:
                yield direction, next_location, cell

    def count_neighbours(self, location: Location) -> int:
        return sum(1 for _ in self.neighbours(location))


def snake_length(snake: Dict) -> int:
    return snake.get('length', len(snake['body']))


def remove_snake_bodies(board: Board, snakes: List[Dict]) -> Board:
    for snake in snakes:
        for segment in snake['body']:
            board.remove(to_location(segment))
    return board


def add_hazards(board: Board, hazards: List[Dict]) -> Board:
    for hazard in hazards:
        cell = board.get(to_location(hazard))
        if cell:
            cell.cost = HAZARD_COST
    return board


def add_food(board: Board, foods: List[Dict]) -> Board:
    for food in foods:
        cell = board.get(to_location(food))
        if cell:
            cell.food = True
    return board


def add_tunnels(board: Board) -> Board:
    """Raise the cost of narrow squares, where a pursuer can trap us"""
    tunnels = [
        location for location, cell in board.cells.items()
        if not cell.food and board.count_neighbours(location) < 3
    ]
    for location in tunnels:
        board.cells[location].cost = TUNNEL_COST
    return board


def add_head_hazards(board: Board, snakes: List[Dict], me: Dict) -> Board:
    """Squares a snake at least our size can move into next turn"""
    my_length = snake_length(me)
    for snake in snakes:
        if snake['id'] == me['id'] or snake_length(snake) < my_length:
            continue
        snake_head = to_location(snake['body'][0])
        for _, _, cell in board.neighbours(snake_head):
            cell.cost = HEAD_THREAT_COST
    return board


def add_smaller_snake_heads(board: Board, snakes: List[Dict], me: Dict) -> Board:
    """Heads of smaller snakes become targets we can hunt"""
    my_length = snake_length(me)
    for snake in snakes:
        if snake['id'] == me['id'] or snake_length(snake) >= my_length:
            continue
        x, y = to_location(snake['head'])
        if 0 <= x < board.width and 0 <= y < board.height:
            board.cells[(x, y)] = Cell(target=True, price=TARGET_PRICE)
    return board


def build_board(width: int, height: int, snakes: List[Dict], hazards: List[Dict],
                foods: List[Dict], me: Dict) -> Board:
    """Build the annotated board for this turn. Later passes read earlier ones."""
    board = Board.create(width, height)
    remove_snake_bodies(board, snakes)
    add_hazards(board, hazards)
    add_food(board, foods)
    add_tunnels(board)
    add_head_hazards(board, snakes, me)
    add_smaller_snake_heads(board, snakes, me)
    return board
