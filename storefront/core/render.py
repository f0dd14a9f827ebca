"""Render Descriptor — what the 3D renderer needs, and nothing it feeds back.

Invariants:
    - The core hands out a model reference, a color/material and material presets
    - pose_at is a pure function of elapsed time; no per-frame mutable state
    - Hover events and load failures stay inside the renderer

Design Decisions:
    - Rotation of 0.5 rad/s about X and Y, matching the storefront's spinning previews
"""

import math
from dataclasses import dataclass

from storefront.core.catalog import Product

ROTATION_SPEED_RAD_PER_SEC = 0.5


@dataclass(frozen=True)
class MaterialPreset:
    metalness: float = 0.8
    roughness: float = 0.2
    scale: float = 0.2


@dataclass(frozen=True)
class RenderRequest:
    model_reference: str
    color_or_material: str
    material: MaterialPreset = MaterialPreset()


@dataclass(frozen=True)
class Pose:
    rotation_x: float
    rotation_y: float


def render_request_for(product: Product) -> RenderRequest:
    return RenderRequest(
        model_reference=product.model_reference,
        color_or_material=product.color_or_material,
    )


def pose_at(elapsed_seconds: float) -> Pose:
    """Rotation after elapsed_seconds, wrapped into [0, 2π)."""
    angle = (max(elapsed_seconds, 0.0) * ROTATION_SPEED_RAD_PER_SEC) % math.tau
    return Pose(rotation_x=angle, rotation_y=angle)
