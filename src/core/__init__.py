"""
Core domain types, arithmetic adapters and positivity validators.

This module contains the building blocks that ranges and progressions
are assembled from; it does not depend on src.ranges.
"""
