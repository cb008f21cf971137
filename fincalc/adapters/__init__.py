"""Entry points: CLIs and the Streamlit page."""
