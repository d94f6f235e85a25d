"""
FastAPI routers grouped by domain (tasks, auth, games).

Each module exposes an APIRouter included by app.py or game_app.py.
"""
