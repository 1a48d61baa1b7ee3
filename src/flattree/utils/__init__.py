"""Utility functions and tools used across the flattree package.

- `logger`: Package logger configuration
- `factory`: Name to class tables and configuration-driven instantiation
- `docstring`: Docstring inheritance utilities for record class hierarchies
- `stopwatch`: Performance timing utilities
- `constituents`: Flattening of nested candidate constituent lists
- `consistency`: Internal consistency checks of converted records
"""
