#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--size N] [--mines N]
    python main.py simulate [--games N]
"""
from src.minesweeper.cli import main


if __name__ == "__main__":
    main()
