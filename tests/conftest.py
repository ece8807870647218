"""
Pytest configuration
"""
import sys
from pathlib import Path

# Project root holds cons_cell.py and bench.py
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
