"""Mapping layer between domain objects and SQLAlchemy persistence entities."""

__version__ = "0.1.0"
