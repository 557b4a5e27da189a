import logging
import random
import time
from typing import Dict, Optional, Tuple

from flask import Flask, g, jsonify, request

from board import Board, Location, build_board, to_location
from pathfinding import PathPlan, get_next_step, path_to, plan_furthest_path, plan_paths

logger = logging.getLogger(__name__)

SNAKE_INFO = {
    'apiversion': '1',
    'author': 'SociableSteve',
    'color': '#00711c',
    'head': 'viper',
    'tail': 'rattle',
    'version': '0.0.1-beta',
}

DIRECTIONS = ['up', 'down', 'left', 'right']


class BattlesnakeLogic:
    def __init__(self, rng: Optional[random.Random] = None,
                 strategy_thresholds: Optional[Dict[str, int]] = None):
        self.rng = rng or random.Random()

        # Strategy thresholds
        self.strategy_thresholds = {
            'attack_health': 50,
        }
        if strategy_thresholds:
            self.strategy_thresholds.update(strategy_thresholds)

        self.directions = list(DIRECTIONS)

    def get_move(self, game_state: Dict) -> str:
        """Main function to determine the next move"""
        my_snake = game_state['you']
        board_state = game_state['board']
        head = to_location(my_snake['head'])

        logger.info('Calculating move %s', game_state.get('turn', 0))

        board = build_board(
            board_state['width'],
            board_state['height'],
            board_state['snakes'],
            board_state.get('hazards', []),
            board_state['food'],
            my_snake,
        )
        plan = plan_paths(board, head)

        strategy, destination = self.choose_destination(my_snake['health'], plan, board)
        if destination is None:
            move = self.rng.choice(self.directions)
            logger.info('No path found, moving randomly: %s', move)
            return move

        move = get_next_step(board, destination, head).direction
        logger.info('Heading to %s: %s (%d steps, price %d)', strategy, move,
                    len(path_to(board, destination, head)), board.cells[destination].price)
        return move

    def choose_destination(self, health: int, plan: PathPlan,
                           board: Board) -> Tuple[str, Optional[Location]]:
        """Pick attack, food or the furthest reachable point, in that order"""
        if health > self.strategy_thresholds['attack_health'] and plan.target is not None:
            return 'attack', plan.target
        if plan.food is not None:
            return 'food', plan.food

        # Can't find a path to food, stay alive as long as possible
        furthest = plan_furthest_path(board)
        if furthest is not None:
            return 'furthest point', furthest
        return 'random', None


def create_battlesnake_server(snake_logic: Optional[BattlesnakeLogic] = None) -> Flask:
    """Create Flask server for Battlesnake"""
    app = Flask(__name__)
    snake_logic = snake_logic or BattlesnakeLogic()

    @app.before_request
    def start_timer():
        g.started = time.perf_counter()

    @app.after_request
    def log_request(response):
        elapsed = (time.perf_counter() - g.get('started', time.perf_counter())) * 1000
        logger.info('%s %s %s %.1f ms', request.method, request.path,
                    response.status_code, elapsed)
        response.headers.set('server', 'battlesnake/weighted-path-snake')
        return response

    @app.route('/')
    def info():
        return jsonify(SNAKE_INFO)

    @app.route('/start', methods=['POST'])
    def start():
        game_state = request.get_json(silent=True) or {}
        logger.info('Game %s starting', game_state.get('game', {}).get('id'))
        return 'ok'

    @app.route('/move', methods=['POST'])
    def move():
        game_state = request.get_json(silent=True)
        if not isinstance(game_state, dict) or 'you' not in game_state or 'board' not in game_state:
            return jsonify({'error': 'expected a Battlesnake game state'}), 400
        try:
            next_move = snake_logic.get_move(game_state)
        except Exception:
            # Always answer inside the turn timeout
            logger.exception('Move calculation failed, falling back to up')
            next_move = 'up'
        return jsonify({'move': next_move})

    @app.route('/end', methods=['POST'])
    def end():
        game_state = request.get_json(silent=True) or {}
        logger.info('Game %s ended', game_state.get('game', {}).get('id'))
        return 'ok'

    # Health check endpoint
    @app.route('/health')
    def health():
        return jsonify({'status': 'healthy'})

    return app
