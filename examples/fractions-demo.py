"""
Drive the standard library's fractions module through handles.

Usage:
    python examples/fractions-demo.py
"""

import logging
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from module_wrapper import load_module, call_constructor_and_wrap

logging.basicConfig(level=logging.DEBUG, format="[module-wrapper] %(name)s: %(message)s")

fractions = load_module("fractions")
print(f"Handle before use: {fractions}")

half = call_constructor_and_wrap(fractions, "Fraction", [1, 2])
third = call_constructor_and_wrap(fractions, "Fraction", [1, 3])
print(f"Handle after use: {fractions}")

total = half.call_function_and_wrap("__add__", [third], unwrap_args=True)
print(f"1/2 + 1/3 = {total.resolve()}")
print(f"denominator = {total.get_property('denominator')}")
