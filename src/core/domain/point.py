"""
Point — Interpolation Sample

Immutable Pydantic models for one (x, y) sample and for the selected point
set handed to the Lagrange evaluator.
"""

from pydantic import BaseModel, Field, model_validator


class Point(BaseModel):
    """Sample (x, y) with arbitrary-precision integer coordinates."""

    x: int = Field(..., description="Abscissa, parsed from the base-10 record key")
    y: int = Field(..., description="Ordinate, parsed from the base-N value")

    model_config = {"frozen": True, "strict": True}


class PointSet(BaseModel):
    """
    The k points selected for interpolation.

    Points are sorted ascending by x and pairwise distinct in x.
    total_available keeps the number of points present in the source record.
    """

    k: int = Field(..., gt=0, description="Number of points required (keys.k)")
    points: tuple[Point, ...] = Field(..., description="Selected points, ascending x")
    total_available: int = Field(..., ge=0, description="Points found in the record")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def validate_selection(self) -> "PointSet":
        if len(self.points) != self.k:
            raise ValueError(f"expected {self.k} points, got {len(self.points)}")
        if self.total_available < self.k:
            raise ValueError(
                f"total_available {self.total_available} below k {self.k}"
            )
        xs = [p.x for p in self.points]
        if any(a >= b for a, b in zip(xs, xs[1:])):
            raise ValueError("points must be strictly ascending in x")
        return self

    @property
    def xs(self) -> tuple[int, ...]:
        return tuple(p.x for p in self.points)
