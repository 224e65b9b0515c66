"""Adaptateur HTTP (FastAPI) de HexaMessage."""
