"""Application engine – parse → filter → score → sort → paginate."""
from mp_query.application.engine.engine import QueryEngine

__all__ = ["QueryEngine"]
