"""
Top-level Streamlit app package.

This package hosts the interactive lake water-quality dashboard (Streamlit),
decoupled from the lakeviz.* library modules. Analysis and color logic remain
under lakeviz.*; the Streamlit UI shell and app-specific helpers live here.

CLI entrypoint (configured in pyproject.toml):
    lakeviz-app = app.main:main
"""
