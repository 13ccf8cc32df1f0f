"""
Root conftest.py: puts the repository root on sys.path so that the tests can
import pypic without installing the package in editable mode.
"""

import sys
from pathlib import Path

_ROOT = str(Path(__file__).resolve().parent)
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)
