# MIT License (see LICENSE)
"""
Input/Output utilities for the gravity simulation.

This subpackage provides:
    - JSON serialization: Save and load worlds to/from JSON files.
    - Round-trip support: a loaded world continues stepping exactly as the
      saved one would have.

Typical usage:
    from gravity_sim.io import load_world, save_world, world_to_json

    world = load_world("binary.json")
    save_world(world, "output.json")
    data = world_to_json(world)
"""
from .json_io import (
    load_world,
    load_world_raw,
    world_from_json,
    save_world,
    world_to_json,
    bodies_to_json,
    body_to_json,
    body_from_json,
)

__all__ = [
    # Loading
    "load_world",
    "load_world_raw",
    "world_from_json",
    # Saving
    "save_world",
    # Serialization
    "world_to_json",
    "bodies_to_json",
    "body_to_json",
    "body_from_json",
]
