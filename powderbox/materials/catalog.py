"""Catalog — the element browser's view of the material set.

Groups every placeable material into a browser tab with a short label
and description.  Front-ends use it to cycle tools; the core never
reads it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from powderbox.materials.material import Material


class Category(Enum):
    """Browser tabs, in display order."""

    POWDERS = auto()
    LIQUIDS = auto()
    SOLIDS = auto()
    GASES = auto()
    SPECIAL = auto()

    @property
    def title(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class CatalogEntry:
    """One selectable tool in the browser.

    Attributes:
        kind: Material placed by this tool.
        category: Tab the entry is listed under.
        label: Short name shown in the list.
        description: One-line blurb.
    """

    kind: Material
    category: Category
    label: str
    description: str


C = Category
M = Material

CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry(M.SAND, C.POWDERS, "Sand", "Classic falling grains."),
    CatalogEntry(M.GUNPOWDER, C.POWDERS, "Gunpowder", "Explodes when ignited."),
    CatalogEntry(M.ASH, C.POWDERS, "Ash", "Burnt residue."),
    CatalogEntry(M.SNOW, C.POWDERS, "Snow", "Melts near heat."),
    CatalogEntry(M.WATER, C.LIQUIDS, "Water", "Flows, cools, extinguishes."),
    CatalogEntry(M.SALTWATER, C.LIQUIDS, "Salt Water", "Conductive water."),
    CatalogEntry(M.OIL, C.LIQUIDS, "Oil", "Light, flammable."),
    CatalogEntry(M.ETHANOL, C.LIQUIDS, "Ethanol", "Very flammable."),
    CatalogEntry(M.ACID, C.LIQUIDS, "Acid", "Dissolves many materials."),
    CatalogEntry(M.LAVA, C.LIQUIDS, "Lava", "Hot molten rock."),
    CatalogEntry(M.MERCURY, C.LIQUIDS, "Mercury", "Heavy liquid metal."),
    CatalogEntry(M.STONE, C.SOLIDS, "Stone", "Heavy solid block."),
    CatalogEntry(M.GLASS, C.SOLIDS, "Glass", "From sand + lava."),
    CatalogEntry(M.WALL, C.SOLIDS, "Wall", "Indestructible barrier."),
    CatalogEntry(M.WOOD, C.SOLIDS, "Wood", "Flammable solid."),
    CatalogEntry(M.PLANT, C.SOLIDS, "Plant", "Grows on wet dirt."),
    CatalogEntry(M.SEAWEED, C.SOLIDS, "Seaweed", "Grows in water over sand."),
    CatalogEntry(M.METAL, C.SOLIDS, "Metal", "Conductive solid."),
    CatalogEntry(M.WIRE, C.SOLIDS, "Wire", "Conductive path."),
    CatalogEntry(M.ICE, C.SOLIDS, "Ice", "Melts into water."),
    CatalogEntry(M.COAL, C.SOLIDS, "Coal", "Burns longer."),
    CatalogEntry(M.DIRT, C.SOLIDS, "Dirt", "Gets wet; grows plants."),
    CatalogEntry(M.WET_DIRT, C.SOLIDS, "Wet Dirt", "Dries over time."),
    CatalogEntry(M.SMOKE, C.GASES, "Smoke", "Rises; may fall as ash."),
    CatalogEntry(M.STEAM, C.GASES, "Steam", "Condenses to water."),
    CatalogEntry(M.GAS, C.GASES, "Gas", "Neutral rising gas."),
    CatalogEntry(M.TOXIC_GAS, C.GASES, "Toxic Gas", "Nasty chemical cloud."),
    CatalogEntry(M.HYDROGEN, C.GASES, "Hydrogen", "Very light, explosive."),
    CatalogEntry(M.CHLORINE, C.GASES, "Chlorine", "Harms plants."),
    CatalogEntry(M.FIRE, C.SPECIAL, "Fire", "Burns & flickers upward."),
    CatalogEntry(M.LIGHTNING, C.SPECIAL, "Lightning", "Electrical bolt."),
    CatalogEntry(M.HUMAN, C.SPECIAL, "Human", "Avoids zombies, fights back."),
    CatalogEntry(M.ZOMBIE, C.SPECIAL, "Zombie", "Chases and infects humans."),
    CatalogEntry(M.EMPTY, C.SPECIAL, "Eraser", "Place empty space."),
)


def entries_in(category: Category) -> list[CatalogEntry]:
    """Return the entries listed under ``category``, in display order."""
    return [entry for entry in CATALOG if entry.category is category]


def entry_for(kind: Material) -> CatalogEntry:
    """Return the catalog entry that places ``kind``.

    Raises:
        KeyError: If no entry places ``kind``.
    """
    for entry in CATALOG:
        if entry.kind is kind:
            return entry
    raise KeyError(kind)


def next_entry(kind: Material, step: int = 1) -> CatalogEntry:
    """Return the entry ``step`` positions after the one for ``kind``.

    Wraps around both ends of the catalog.
    """
    index = CATALOG.index(entry_for(kind))
    return CATALOG[(index + step) % len(CATALOG)]
