"""Streamlit entry point: streamlit run app.py"""
from drinklist.web.app import main

main()
