"""Material — the closed set of cell kinds and their classification.

A cell's behaviour class is never stored; it is always re-derived from
its kind through the predicate functions below.  Category sets are
disjoint except where a predicate deliberately cuts across them
(flammable, conductive, dissolvable, hazard).
"""

from __future__ import annotations

from enum import Enum, auto


class Material(Enum):
    """Every kind of matter a cell can hold."""

    EMPTY = auto()
    # powders
    SAND = auto()
    GUNPOWDER = auto()
    ASH = auto()
    SNOW = auto()
    # liquids
    WATER = auto()
    SALTWATER = auto()
    OIL = auto()
    ETHANOL = auto()
    ACID = auto()
    LAVA = auto()
    MERCURY = auto()
    # solids / terrain
    STONE = auto()
    GLASS = auto()
    WALL = auto()
    WOOD = auto()
    PLANT = auto()
    METAL = auto()
    WIRE = auto()
    ICE = auto()
    COAL = auto()
    DIRT = auto()
    WET_DIRT = auto()
    SEAWEED = auto()
    # gases
    SMOKE = auto()
    STEAM = auto()
    GAS = auto()
    TOXIC_GAS = auto()
    HYDROGEN = auto()
    CHLORINE = auto()
    # actors / special
    FIRE = auto()
    LIGHTNING = auto()
    HUMAN = auto()
    ZOMBIE = auto()


M = Material

_POWDERS = frozenset({M.SAND, M.GUNPOWDER, M.ASH, M.SNOW})

_LIQUIDS = frozenset(
    {M.WATER, M.SALTWATER, M.OIL, M.ETHANOL, M.ACID, M.LAVA, M.MERCURY},
)

_SOLIDS = frozenset(
    {
        M.STONE,
        M.GLASS,
        M.WALL,
        M.WOOD,
        M.PLANT,
        M.METAL,
        M.WIRE,
        M.ICE,
        M.COAL,
        M.DIRT,
        M.WET_DIRT,
        M.SEAWEED,
    },
)

_GASES = frozenset(
    {M.SMOKE, M.STEAM, M.GAS, M.TOXIC_GAS, M.HYDROGEN, M.CHLORINE},
)

_FLAMMABLE = frozenset(
    {M.WOOD, M.PLANT, M.OIL, M.ETHANOL, M.GUNPOWDER, M.COAL, M.SEAWEED},
)

_CONDUCTIVE = frozenset({M.METAL, M.WIRE, M.MERCURY, M.SALTWATER})

_DISSOLVABLE = frozenset(
    {
        M.SAND,
        M.STONE,
        M.GLASS,
        M.WOOD,
        M.PLANT,
        M.METAL,
        M.WIRE,
        M.ASH,
        M.COAL,
        M.SEAWEED,
        M.DIRT,
        M.WET_DIRT,
    },
)

_HAZARDS = frozenset(
    {M.FIRE, M.LAVA, M.ACID, M.TOXIC_GAS, M.CHLORINE, M.LIGHTNING},
)

# Relative density, only meaningful between liquids (and the gases that
# liquids fall through).  Higher sinks.
_DENSITY: dict[Material, int] = {
    M.GAS: 1,
    M.HYDROGEN: 1,
    M.STEAM: 2,
    M.SMOKE: 3,
    M.CHLORINE: 5,
    M.ETHANOL: 85,
    M.OIL: 90,
    M.WATER: 100,
    M.SALTWATER: 103,
    M.ACID: 110,
    M.LAVA: 160,
    M.MERCURY: 200,
}

# Larger than every liquid so a liquid never "sinks" into a solid.
DENSITY_SENTINEL = 999

_DISPLAY_NAMES: dict[Material, str] = {
    M.EMPTY: "Empty",
    M.SAND: "Sand",
    M.GUNPOWDER: "Gunpowder",
    M.ASH: "Ash",
    M.SNOW: "Snow",
    M.WATER: "Water",
    M.SALTWATER: "Salt Water",
    M.OIL: "Oil",
    M.ETHANOL: "Ethanol",
    M.ACID: "Acid",
    M.LAVA: "Lava",
    M.MERCURY: "Mercury",
    M.STONE: "Stone",
    M.GLASS: "Glass",
    M.WALL: "Wall",
    M.WOOD: "Wood",
    M.PLANT: "Plant",
    M.METAL: "Metal",
    M.WIRE: "Wire",
    M.ICE: "Ice",
    M.COAL: "Coal",
    M.DIRT: "Dirt",
    M.WET_DIRT: "Wet Dirt",
    M.SEAWEED: "Seaweed",
    M.SMOKE: "Smoke",
    M.STEAM: "Steam",
    M.GAS: "Gas",
    M.TOXIC_GAS: "Toxic Gas",
    M.HYDROGEN: "Hydrogen",
    M.CHLORINE: "Chlorine",
    M.FIRE: "Fire",
    M.LIGHTNING: "Lightning",
    M.HUMAN: "Human",
    M.ZOMBIE: "Zombie",
}


def is_powder(kind: Material) -> bool:
    """Return True for granular matter that piles up (sand, ash, ...)."""
    return kind in _POWDERS


def is_liquid(kind: Material) -> bool:
    """Return True for kinds that flow sideways and stack by density."""
    return kind in _LIQUIDS


def is_solid(kind: Material) -> bool:
    """Return True for static terrain kinds."""
    return kind in _SOLIDS


def is_gas(kind: Material) -> bool:
    """Return True for rising, decaying kinds."""
    return kind in _GASES


def is_flammable(kind: Material) -> bool:
    return kind in _FLAMMABLE


def is_conductive(kind: Material) -> bool:
    return kind in _CONDUCTIVE


def is_dissolvable(kind: Material) -> bool:
    """Return True for kinds that acid eats."""
    return kind in _DISSOLVABLE


def is_hazard(kind: Material) -> bool:
    """Return True for kinds that kill humans and zombies on contact."""
    return kind in _HAZARDS


def density(kind: Material) -> int:
    """Return the relative density of ``kind``.

    Non-liquid, non-gas kinds all share ``DENSITY_SENTINEL``.
    """
    return _DENSITY.get(kind, DENSITY_SENTINEL)


def denser_than(a: Material, b: Material) -> bool:
    """Return True if ``a`` is strictly denser than ``b``."""
    return density(a) > density(b)


def display_name(kind: Material) -> str:
    """Human-readable name of a material."""
    return _DISPLAY_NAMES[kind]
