#!/usr/bin/env python3
"""
gridsweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--hazards N] [--seed S]
    python main.py demo [--games N] [--delay SECONDS]
"""
import sys
from pathlib import Path

# Add src to path when running from a checkout
sys.path.insert(0, str(Path(__file__).parent / "src"))

from gridsweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
