"""
Shipped layout configuration files (YAML), installed as package data
"""

from pathlib import Path

CONFIG_DIR = Path(__file__).parent
