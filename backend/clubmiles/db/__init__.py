"""Database engine, sessions and declarative base."""
