"""Streamlit launcher: ``streamlit run streamlit_app.py``."""

from app import main

main()
