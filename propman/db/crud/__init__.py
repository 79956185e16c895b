"""CRUD helpers: plain functions over a SQLAlchemy Session."""
