"""Combat statistics, attack data and damage resolution."""

from __future__ import annotations

from dataclasses import dataclass, field

from dungeonrl import rng
from dungeonrl.kinds import Direction


@dataclass
class CombatStats:
    """Health, damage, range, defence and attack speed of an entity."""

    health: int = 100
    max_health: int = 100
    attack_damage: int = 45
    attack_range: int = 1
    defence: int = 3
    attack_speed: float = 1.0


@dataclass
class AttackData:
    """Modifiers of a single attack and the cells it hits, per facing direction."""

    damage_multiplier: float = 1.0
    speed_multiplier: float = 1.0
    hit_offsets: dict[Direction, list[tuple[int, int]]] = field(default_factory=dict)


@dataclass(frozen=True)
class DamageResult:
    """Damage actually taken and whether the target's health dropped to zero."""

    damage: int
    died: bool


def calculate_damage(attacker_stats: CombatStats, attack_data: AttackData | None = None) -> int:
    """Roll the damage of one hit.

    The base damage is drawn from 80%..120% of the attack damage, reduced by
    half the defence taken from the given stats, then scaled by the attack's
    damage multiplier when there is one.
    """
    base = attacker_stats.attack_damage
    low = int(base * 0.8)
    high = int(base * 1.2)
    damage = rng.get(low, high)
    damage -= int(attacker_stats.defence / 2)
    if attack_data is not None:
        damage = int(damage * attack_data.damage_multiplier)
    return damage


def take_damage(stats: CombatStats, damage: int) -> DamageResult:
    """Apply damage to stats, never taking more than the remaining health."""
    if damage > stats.health:
        damage = stats.health
    stats.health -= damage
    return DamageResult(damage, stats.health <= 0)