"""
Test configuration: makes the top-level modules importable from a checkout.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
