"""
Core domain models, exact arithmetic, and invariants.

This module contains the building blocks that are independent of any I/O
(files, stdin, directories).

Python 3.11+ caps int <-> decimal str conversion at 4300 digits; points and
results are arbitrary precision, so the cap is lifted for the process.
"""

import sys

if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)
