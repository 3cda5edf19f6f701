"""
Behave environment configuration

Resets scenario state and makes the project importable when behave runs
from a checkout without an installed package.
"""

import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


def before_scenario(context, scenario):
    """Run before each scenario"""
    for name in ("items", "settings", "result", "error"):
        if hasattr(context, name):
            delattr(context, name)
