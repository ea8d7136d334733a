"""A single glyph cell modelled as a point-mass disc."""

import math
from typing import List, Optional

from wordswarm.vector import Vector


class Particle:
    """
    Represents one "on" cell of a glyph, moving freely and bouncing elastically.

    Attributes:
        position:        current center (Vector)
        velocity:        displacement per tick (Vector)
        radius:          contact radius, half the cell size
        info:            the character this particle was laid out from
        trail:           sampled past positions, most recent first
        tail_length:     maximum number of trail entries
        tail_threshold:  a trail sample is taken every N advances
        is_score_target: set by the world when game mode picks this particle
    """

    def __init__(
        self,
        position: Optional[Vector] = None,
        velocity: Optional[Vector] = None,
        radius: float = 20,
        info: str = "",
        tail_length: int = 3,
        tail_threshold: int = 1,
    ):
        self.position = position if position is not None else Vector()
        self.velocity = velocity if velocity is not None else Vector()
        self.radius = radius
        self.info = info
        self.trail: List[Vector] = []
        self.tail_length = tail_length
        self.tail_threshold = tail_threshold
        self.trail_step_counter = 0
        self.is_score_target = False

    def __repr__(self):
        return f"Particle(info={self.info!r}, position={self.position}, velocity={self.velocity})"

    def next_position(self) -> Vector:
        return self.position + self.velocity

    def intersects(self, other: "Particle") -> bool:
        """True when this particle's next position overlaps the other's current one."""
        dx = self.position.x + self.velocity.x - other.position.x
        dy = self.position.y + self.velocity.y - other.position.y
        return self.radius + other.radius >= math.sqrt(dx * dx + dy * dy)

    def collide(self, other: "Particle") -> bool:
        """
        Resolve an equal-mass, frictionless contact with `other`.

        Both new velocities are computed from the pre-contact state before either is
        assigned. Only the component along the line of centers is exchanged; the
        tangential component of each velocity is kept.

        Returns:
            True if the particles were in contact and their velocities changed.
        """
        if not self.intersects(other):
            return False
        new_velocity = self._velocity_after_contact(other)
        other_velocity = other._velocity_after_contact(self)
        self.velocity = new_velocity
        other.velocity = other_velocity
        return True

    def _velocity_after_contact(self, other: "Particle") -> Vector:
        normal = (self.position - other.position).unit()
        relative = self.velocity - other.velocity
        return self.velocity - normal * relative.dot(normal)

    def advance(self):
        """
        Integrate one explicit Euler step and sample the trail.

        The trail receives the new position on every `tail_threshold`-th call only,
        then is cut back to `tail_length` entries.
        """
        self.position = self.next_position()
        if self.trail_step_counter % self.tail_threshold == 0:
            self.trail.insert(0, self.position)
            del self.trail[self.tail_length:]
        self.trail_step_counter += 1


__all__ = ["Particle"]
