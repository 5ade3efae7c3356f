# MIT License (see LICENSE)
"""
Collision detection and merging.

This subpackage provides:
    - Detection: find overlapping pairs and claim them for merging.
    - Merge: combine two bodies conserving mass and momentum.

Typical usage:
    from gravity_sim.collision import find_colliding_pairs, merge_bodies

    for a, b in find_colliding_pairs(bodies):
        merged = merge_bodies(a, b)
"""
from .detect import find_colliding_pairs
from .merge import merge_bodies, weighted_average, MergeResult

__all__ = [
    # Detection
    "find_colliding_pairs",
    # Merge
    "merge_bodies",
    "weighted_average",
    "MergeResult",
]
