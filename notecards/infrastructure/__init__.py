"""
Infrastructure layer.

Adapters for the outside world: FastAPI routers, SQLAlchemy repositories
and AI provider clients.
"""
