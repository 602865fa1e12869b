#!/usr/bin/env python3
"""
Run the ipguard CLI with correct PYTHONPATH (works on Windows and Unix).
Usage: python scripts/run_app.py <command> [args...]
Example: python scripts/run_app.py table
         python scripts/run_app.py route --input observation.json
         python scripts/run_app.py analyze --image photo.jpg --selfie-verified
"""
import os
import subprocess
import sys

script_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(script_dir)
src = os.path.join(project_root, "src")
app_script = os.path.join(src, "app.py")

env = os.environ.copy()
env["PYTHONPATH"] = src + (os.pathsep + env["PYTHONPATH"] if env.get("PYTHONPATH") else "")

sys.exit(
    subprocess.run(
        [sys.executable, app_script] + sys.argv[1:],
        cwd=project_root,
        env=env,
    ).returncode
)
