#!/usr/bin/env python3
"""
Script de inicio de la API.

El puerto se toma de la variable de entorno PORT (default 3000).
"""

from api.main import run_server

if __name__ == "__main__":
    run_server()
