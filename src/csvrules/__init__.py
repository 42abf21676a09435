"""csvrules -- declarative rule-based validation of tabular data.

The core (``csvrules.models`` and ``csvrules.validation``) evaluates a rule
set against an in-memory table and performs no I/O. The ``csvrules.io`` and
``csvrules.cli`` subpackages provide the CSV and command-line front ends.
"""

__all__ = ["__version__"]

__version__ = "1.0.0"
