"""A small snake arcade game: board logic, snake, food and a pygame front end."""

__version__ = "0.1.0"