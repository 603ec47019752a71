"""Business logic for each resource; plain functions over a SQLAlchemy session."""
