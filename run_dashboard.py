#!/usr/bin/env python3
"""Launcher for the Budget Dashboard.

This script launches Streamlit with the budget_dashboard directory as the app
root, enabling automatic page discovery from the pages/ subdirectory.
"""

import os
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
dashboard_dir = project_root / "budget_dashboard"

if __name__ == "__main__":
    # Streamlit discovers pages/ relative to the main script
    os.chdir(dashboard_dir)
    sys.path.insert(0, str(project_root))
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        "Home.py"
    ])
