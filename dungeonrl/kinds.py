"""Enumerations shared across the game: directions, tile kinds, states and identifiers."""

from enum import Enum, auto


class Direction(Enum):
    """A facing or movement direction on the grid."""

    UP = auto()
    LEFT = auto()
    BOTTOM = auto()
    RIGHT = auto()


class TileType(Enum):
    """The kind of a map tile."""

    NONE = auto()
    FLOOR = auto()
    WALL = auto()


class EntityState(Enum):
    """What an entity is currently doing."""

    IDLE = auto()
    MOVING = auto()
    ATTACKING = auto()


class EntityAIState(Enum):
    """The behaviour an AI-controlled entity is in."""

    NONE = auto()
    PATROLLING = auto()
    CHASING = auto()
    ATTACKING = auto()


class EntityType(Enum):
    """The kinds of entity that can be spawned."""

    PLAYER = auto()
    SKLETORUS = auto()


class AnimationIdentifier(Enum):
    """Identifiers of generic and attack animations."""

    GENERIC_SPELL_CAST = auto()
    GENERIC_THRUST_UNARMED = auto()
    GENERIC_WALK = auto()
    GENERIC_SLASH_UNARMED = auto()
    GENERIC_SHOOT = auto()
    GENERIC_HURT = auto()

    ATTACK1 = auto()
    ATTACK2 = auto()
    ATTACK3 = auto()