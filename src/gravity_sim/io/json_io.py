# MIT License (see LICENSE)
"""
JSON serialization and deserialization for simulation worlds.

JSON Schema Overview:
---------------------
{
  "G": float,                      # Default: 1.0
  "bounds": [width, height],       # Default: [500, 500]
  "initial_density": float,        # Default: 25.0
  "iteration": int,                # Completed steps, default: 0
  "time": float,                   # Simulated time, default: 0.0
  "bodies": [
    {
      "id": int,                   # Default: numbered in list order
      "mass": float,               # Required, > 0
      "density": float,            # Default: the world's initial_density
      "position": [x, y],          # Default: [0, 0]
      "velocity": [vx, vy],        # Default: [0, 0]
      "acceleration": [ax, ay]     # Default: [0, 0]; carried so a reloaded
                                   # world resumes the Verlet drift unchanged
    }
  ]
}
"""
from __future__ import annotations
import json
import logging
from typing import Any

import numpy as np

from ..constants import G_DEFAULT, DEFAULT_BOUNDS, DEFAULT_DENSITY
from ..types import Body, Vector2D
from ..world import World

logger = logging.getLogger(__name__)


def load_world_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a world file without object construction.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def world_from_json(data: dict[str, Any]) -> World:
    """
    Construct a World from a parsed JSON dictionary.

    Raises:
        ValueError: If bounds are malformed or a body lacks 'mass',
            or two bodies share an id.
        InvalidBodyError: If a body has invalid mass or density.
    """
    bounds = data.get("bounds", list(DEFAULT_BOUNDS))
    if len(bounds) != 2:
        raise ValueError(f"bounds must be [width, height], got {bounds!r}")

    initial_density = float(data.get("initial_density", DEFAULT_DENSITY))
    bodies = [
        body_from_json(body_data, default_density=initial_density)
        for body_data in data.get("bodies", [])
    ]
    ids = [b.id for b in bodies if b.id >= 0]
    if len(ids) != len(set(ids)):
        raise ValueError(f"duplicate body ids in {ids!r}")

    # Bodies without a stored id are numbered after the highest stored one
    return World(
        bounds=(float(bounds[0]), float(bounds[1])),
        G=float(data.get("G", G_DEFAULT)),
        initial_density=initial_density,
        bodies=bodies,
        iteration=int(data.get("iteration", 0)),
        time=float(data.get("time", 0.0)),
        next_id=int(data.get("next_id", 1)),
    )


def load_world(path: str) -> World:
    """
    Load and construct a ready-to-step World from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If required fields are missing or malformed.
    """
    world = world_from_json(load_world_raw(path))
    logger.info("Loaded world from %s (%d bodies)", path, len(world.bodies))
    return world


def body_from_json(d: dict[str, Any], default_density: float = DEFAULT_DENSITY) -> Body:
    """
    Parse a single body definition from a dictionary.

    Args:
        d: Dictionary containing body properties.
        default_density: Density used when the entry has none.

    Returns:
        Body instance (not yet part of any world; id is -1 unless stored).
    """
    if "mass" not in d:
        raise ValueError("Body definition missing required 'mass' field.")

    return Body(
        mass=float(d["mass"]),
        density=float(d.get("density", default_density)),
        position=_to_vector(d.get("position", [0.0, 0.0])),
        velocity=_to_vector(d.get("velocity", [0.0, 0.0])),
        acceleration=_to_vector(d.get("acceleration", [0.0, 0.0])),
        id=int(d.get("id", -1)),
    )


def body_to_json(body: Body, default_density: float = DEFAULT_DENSITY) -> dict[str, Any]:
    """
    Serialize a Body to a dictionary (round-trip compatible).

    Density and acceleration are omitted when they hold default values,
    and id when the body was never added to a world.
    previous_acceleration is not stored: the next force pass overwrites it.
    """
    result = {
        "mass": body.mass,
        "position": _to_list(body.position),
        "velocity": _to_list(body.velocity),
    }
    if body.id >= 0:
        result["id"] = body.id
    if body.density != default_density:
        result["density"] = body.density
    if body.acceleration != Vector2D.zero():
        result["acceleration"] = _to_list(body.acceleration)
    return result


def bodies_to_json(bodies: list[Body], default_density: float = DEFAULT_DENSITY) -> list[dict[str, Any]]:
    """Serialize the live bodies of a list to a JSON-compatible list."""
    return [body_to_json(b, default_density) for b in bodies if b.alive]


def world_to_json(world: World) -> dict[str, Any]:
    """
    Serialize a complete World to a dictionary.

    Captured state includes configuration, step counters and all live bodies.
    """
    return {
        "G": world.G,
        "bounds": [world.bounds.width, world.bounds.height],
        "initial_density": world.initial_density,
        "iteration": world.iteration,
        "time": world.time,
        "next_id": world.next_id,
        "bodies": bodies_to_json(world.bodies, world.initial_density),
    }


def save_world(world: World, path: str, indent: int = 2) -> None:
    """Save a World to a JSON file on disk."""
    data = world_to_json(world)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.info("Saved world to %s (%d bodies)", path, len(data["bodies"]))


def _to_vector(value: Any) -> Vector2D:
    """Helper: parse an [x, y] list, rejecting other lengths."""
    arr = np.asarray(value, dtype=np.float64)
    if arr.shape != (2,):
        raise ValueError(f"expected [x, y], got {value!r}")
    return Vector2D.of(arr)


def _to_list(v: Vector2D) -> list[float]:
    """Helper: Convert a Vector2D to a clean list of floats."""
    return v.as_array().tolist()
