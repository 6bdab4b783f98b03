"""Alternation expansion engine.

The expander is pure: it takes an ordered sequence of lines and returns a new
list, with no I/O and no retained state. File handling and configuration live
in the io and config layers so the CLI can wire them together.
"""
