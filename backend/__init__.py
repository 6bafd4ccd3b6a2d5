"""FastAPI backend for Bond Desk Intelligence."""
