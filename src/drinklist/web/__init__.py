"""Streamlit display layer for DrinkList."""
