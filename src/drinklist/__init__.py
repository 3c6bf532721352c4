"""DrinkList: keep track of the drinks you had tonight."""

__version__ = "0.1.0"
