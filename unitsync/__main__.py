"""
Punto de entrada: python -m unitsync
"""
from unitsync.cli.app import app

if __name__ == "__main__":
    app()
