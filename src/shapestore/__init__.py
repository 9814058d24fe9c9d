"""
Figure Store Package

An in-memory collection of circles and squares with aggregate
perimeter and area queries, driven by a small text menu.

ARCHITECTURAL GUARANTEE:
------------------------
The model and store layers contain ZERO knowledge of:
    - Console input/output
    - Message text
    - Serialization formats

All user-facing text is produced by the console layer.
"""

__version__ = "0.1.0"
