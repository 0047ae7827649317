"""Navigation directions shared by the CLI, the resolver and niri actions."""

from enum import Enum


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def key_name(self) -> str:
        """Editor key notation name: ``Up``, ``Down``, ``Left``, ``Right``."""
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.key_name
