"""Domain types for DrinkList."""
