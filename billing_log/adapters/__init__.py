"""Inbound adapters: command-line entry points and the Streamlit UI."""
