#!/usr/bin/env python3
"""Direct launcher for the Expense Dashboard.

Runs ``streamlit run`` on the dashboard module with the project root on
``sys.path`` so the package imports resolve.
"""

import os
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
dashboard_script = project_root / "expense_dashboard" / "dashboard.py"

if __name__ == "__main__":
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(project_root), env.get("PYTHONPATH")]))
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(dashboard_script)], env=env)
