"""Entry points for the task and game FastAPI apps."""
from recordapi.app import app as task_app, create_app
from recordapi.game_app import app as game_app, create_game_app

APP_FACTORIES = {
    "tasks": create_app,
    "games": create_game_app,
}

__all__ = ["task_app", "game_app", "create_app", "create_game_app", "APP_FACTORIES"]
