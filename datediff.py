# datediff.py

"""
Print how long ago each milestone was, in years, months and days, as of today in a fixed time zone.
"""
from cdjkit.cli import datediff_main

if __name__ == "__main__":
    raise SystemExit(datediff_main())
