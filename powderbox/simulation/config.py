"""Config — load simulation parameters from YAML files.

Grid size, seed, pacing and the whole table of hand-tuned rule
probabilities live in YAML and are parsed into typed dataclasses here.
The probabilities are pacing knobs chosen to look right, not physical
constants, so they are kept in one overridable table.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml


@dataclass
class RuleTable:
    """Tunable constants for every material rule.

    Percentages are integer chances in 0..100 rolled once per check.
    Lifetimes and charges are tick counts.

    Attributes:
        sand_submersion_ticks: Ticks under still water before sand seeds
            seaweed above itself.
        seaweed_spacing: Chebyshev radius that must be free of seaweed
            before sand seeds a new strand.
        liquid_displace_chance: Chance a denser liquid pushes sideways
            into a lighter one.
        water_lava_steam_chance: Chance water quenching lava boils to
            steam instead of setting to stone.
        acid_toxic_chance: Chance a dissolved cell becomes toxic gas.
        acid_consumed_chance: Chance acid is used up by a dissolution.
        acid_salt_chance: Chance acid touching water turns to salt water.
        acid_steam_chance: Chance that reaction also boils the water.
        lava_cooling_age: Age past which lava sets into stone.
        wet_dirt_moisture: Moisture given to dirt touching water.
        gas_drift_up_chance: Chance a sideways gas drift also rises a row.
        hydrogen_rise_steps: Upward moves hydrogen may make per tick.
        gas_ignite_life: Fire lifetime of neutral gas set alight.
        chlorine_toxify_chance: Chance chlorine poisons an adjacent plant.
        steam_condense_chance: Chance expiring steam condenses to water.
        smoke_ash_chance: Chance expiring smoke settles to ash.
        fire_rise_chance: Chance fire climbs into the space above it.
        fire_ignite_chance: Chance fire ignites each flammable neighbour.
        fire_charge_chance: Chance fire energises an adjacent conductor.
        fire_charge: Charge given to a conductor by fire.
        fire_spread_life: Base lifetime of fire spread from fire or wire.
        fire_spread_jitter: Extra random lifetime (0..jitter).
        liquid_fire_life: Lifetime of fire from burning oil, ethanol or
            matter touching lava.
        smoke_life: Lifetime of smoke from doused or burnt-out fire.
        steam_life: Lifetime of steam made by reactions.
        toxic_gas_life: Lifetime of toxic gas made by reactions.
        plant_fire_life: Lifetime of a burning plant or seaweed.
        wood_fire_life: Lifetime of burning wood.
        coal_fire_life: Lifetime of burning coal.
        gunpowder_blast_radius: Blast radius of ignited gunpowder.
        hydrogen_blast_radius: Blast radius of ignited hydrogen or gas.
        lightning_reach: Chebyshev radius lightning affects.
        lightning_life: Ticks a lightning cell lasts.
        lightning_blast_radius: Blast radius of gunpowder hit by lightning.
        lightning_wire_charge: Charge lightning puts in wire and metal.
        lightning_water_charge: Charge lightning puts in water.
        lightning_fire_life: Base lifetime of fire lit by lightning.
        lightning_fire_jitter: Extra random lifetime of lightning fire.
        human_fight_chance: Chance a human attacks an adjacent zombie.
        human_torch_chance: Chance that attack burns instead of ashing.
        zombie_infect_chance: Chance a bitten human turns zombie rather
            than combusting.
        zombie_death_life: Fire lifetime of a zombie killed by a hazard.
        bitten_fire_life: Fire lifetime of a bitten human that combusts.
        torched_fire_life: Base fire lifetime of a torched zombie.
        torched_fire_jitter: Extra random lifetime of a torched zombie.
        agent_sight: Chebyshev radius an agent scans for its opponent.
        agent_climb_chance: Chance a blocked agent steps up and over.
        plant_growth_chance: Chance a rooted plant grows upward.
        seaweed_growth_chance: Chance submerged seaweed grows upward.
        wire_ignite_chance: Chance live wire ignites a flammable neighbour.
        wire_detonate_chance: Chance live wire detonates adjacent gas.
        ice_melt_chance: Chance per hot neighbour that ice melts.
        blast_fire_chance: Share of blast cells that become fire.
        blast_smoke_chance: Share that become smoke (after fire).
        blast_fire_life: Base lifetime of blast fire.
        blast_fire_jitter: Extra random blast fire lifetime.
        blast_smoke_life: Lifetime of blast smoke and gas.
        placed_gas_life: Lifetime of gas placed by the brush.
        placed_fire_life: Lifetime of fire placed by the brush.
    """

    sand_submersion_ticks: int = 220
    seaweed_spacing: int = 2
    liquid_displace_chance: int = 50
    water_lava_steam_chance: int = 50
    acid_toxic_chance: int = 30
    acid_consumed_chance: int = 25
    acid_salt_chance: int = 30
    acid_steam_chance: int = 30
    lava_cooling_age: int = 200
    wet_dirt_moisture: int = 300

    gas_drift_up_chance: int = 50
    hydrogen_rise_steps: int = 2
    gas_ignite_life: int = 12
    chlorine_toxify_chance: int = 35
    steam_condense_chance: int = 15
    smoke_ash_chance: int = 8

    fire_rise_chance: int = 50
    fire_ignite_chance: int = 40
    fire_charge_chance: int = 5
    fire_charge: int = 5
    fire_spread_life: int = 15
    fire_spread_jitter: int = 10
    liquid_fire_life: int = 25
    smoke_life: int = 15
    steam_life: int = 20
    toxic_gas_life: int = 25
    plant_fire_life: int = 20
    wood_fire_life: int = 25
    coal_fire_life: int = 35
    gunpowder_blast_radius: int = 5
    hydrogen_blast_radius: int = 4

    lightning_reach: int = 2
    lightning_life: int = 2
    lightning_blast_radius: int = 6
    lightning_wire_charge: int = 12
    lightning_water_charge: int = 8
    lightning_fire_life: int = 20
    lightning_fire_jitter: int = 10

    human_fight_chance: int = 35
    human_torch_chance: int = 60
    zombie_infect_chance: int = 70
    zombie_death_life: int = 15
    bitten_fire_life: int = 10
    torched_fire_life: int = 10
    torched_fire_jitter: int = 10
    agent_sight: int = 6
    agent_climb_chance: int = 70

    plant_growth_chance: int = 2
    seaweed_growth_chance: int = 2
    wire_ignite_chance: int = 15
    wire_detonate_chance: int = 35
    ice_melt_chance: int = 25

    blast_fire_chance: int = 50
    blast_smoke_chance: int = 30
    blast_fire_life: int = 15
    blast_fire_jitter: int = 10
    blast_smoke_life: int = 20

    placed_gas_life: int = 25
    placed_fire_life: int = 20

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> RuleTable:
        """Build a table from a partial mapping of overrides.

        Raises:
            ValueError: If ``data`` names a rule that does not exist.
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                msg = f"unknown rule {key!r}"
                raise ValueError(msg)
        return cls(**{key: int(value) for key, value in data.items()})


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay (None = OS entropy).
        grid_width: Number of grid columns.
        grid_height: Number of grid rows.
        ticks_per_second: Front-end pacing of the tick loop.
        brush_size: Initial brush radius.
        rules: Rule probabilities and lifetimes.
    """

    seed: int | None = 42
    grid_width: int = 160
    grid_height: int = 100
    ticks_per_second: float = 60.0
    brush_size: int = 1
    rules: RuleTable = field(default_factory=RuleTable)

    def __post_init__(self) -> None:
        """Reject configurations the engine could not run."""
        if self.grid_width <= 0 or self.grid_height <= 0:
            msg = (
                "grid dimensions must be positive, got "
                f"{self.grid_width}x{self.grid_height}"
            )
            raise ValueError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If the file names an unknown rule or an empty grid.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            seed=data.get("seed", cls.seed),
            grid_width=data.get("grid_width", cls.grid_width),
            grid_height=data.get("grid_height", cls.grid_height),
            ticks_per_second=data.get("ticks_per_second", cls.ticks_per_second),
            brush_size=data.get("brush_size", cls.brush_size),
            rules=RuleTable.from_mapping(data.get("rules") or {}),
        )
