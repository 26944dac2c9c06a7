# main.py

"""
Orchestrator: scan a folder of WAV files and report headers DJ players are likely to reject.
"""
from cdjkit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
