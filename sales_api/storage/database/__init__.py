from .db_connector import async_session, dispose_engine, engine, get_db, init_models

__all__ = ["async_session", "dispose_engine", "engine", "get_db", "init_models"]
