from fastapi import Request

from ..managers.game import GameManager


def get_game(request: Request) -> GameManager:
    return request.app.state.game
