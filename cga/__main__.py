"""Entry point for running cga as a module.

This allows running the application with:
    python -m cga [OPTIONS]
"""

from cga.cli import app

if __name__ == "__main__":
    app()
