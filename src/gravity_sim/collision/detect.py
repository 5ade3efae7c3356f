# MIT License (see LICENSE)
"""
Collision detection between spherical bodies.

Two bodies collide when their spheres overlap:
    |p_b - p_a| < r_a + r_b

Every colliding pair is later replaced by a single merged body, and a body
can take part in at most one merge per step.
"""
from __future__ import annotations

from ..types import Body


def find_colliding_pairs(bodies: list[Body]) -> list[tuple[Body, Body]]:
    """
    Find overlapping pairs and mark their members dead.

    Pairs are visited as (i, j), i < j, in insertion order, and the first
    pair that claims a body wins. With three mutually overlapping bodies
    A, B, C (inserted in that order) only (A, B) is returned; C stays alive
    and is merged on a later step if it still overlaps.

    Args:
        bodies: Bodies in insertion order. Dead bodies are ignored.

    Returns:
        Colliding pairs in detection order. Both members of each pair have
        alive set to False on return.
    """
    pairs = []
    n = len(bodies)
    for i in range(n):
        a = bodies[i]
        if not a.alive:
            continue
        for j in range(i + 1, n):
            b = bodies[j]
            if not b.alive:
                continue
            if a.is_colliding_with(b):
                pairs.append((a, b))
                a.alive = False
                b.alive = False
                # a is claimed, move on to the next candidate
                break
    return pairs
