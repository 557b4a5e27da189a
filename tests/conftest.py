import random

import pytest

from battlesnake import BattlesnakeLogic, create_battlesnake_server


def point(x, y):
    return {'x': x, 'y': y}


def make_snake(snake_id, body, health=90):
    body = [point(x, y) for x, y in body]
    return {
        'id': snake_id,
        'name': snake_id,
        'health': health,
        'body': body,
        'head': dict(body[0]),
        'length': len(body),
        'shout': '',
    }


def make_game_state(me, others=(), food=(), hazards=(), width=11, height=11, turn=1):
    return {
        'game': {'id': 'test-game', 'timeout': 500},
        'turn': turn,
        'board': {
            'width': width,
            'height': height,
            'snakes': [me] + list(others),
            'food': [point(x, y) for x, y in food],
            'hazards': [point(x, y) for x, y in hazards],
        },
        'you': me,
    }


@pytest.fixture
def snake_logic():
    return BattlesnakeLogic(rng=random.Random(7))


@pytest.fixture
def client(snake_logic):
    app = create_battlesnake_server(snake_logic)
    app.config['TESTING'] = True
    return app.test_client()
