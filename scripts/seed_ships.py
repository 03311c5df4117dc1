#!/usr/bin/env python3
"""
Seed the ship table with a deterministic random fleet.

Features:
- Deterministic: fixed seed → same fleet every run
- Idempotent: safe to run multiple times (clears before seeding)
- Goes through CreateShip, so every row is validated and rated like an API write

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_ships.py
"""

from __future__ import annotations

import random
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import delete

from space_registry.adapters.postgres_ship_repository import PostgresShipRepository
from space_registry.domain.ship import ShipDraft, ShipType
from space_registry.infra.db.models.ship import ShipRow
from space_registry.infra.db.session import get_session
from space_registry.use_cases.create_ship import CreateShip


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_SHIPS = 40

PREFIXES = ["Orion", "Daedalus", "Nostromo", "Serenity", "Eagle", "Rocinante", "Tempest", "Aurora"]
SUFFIXES = ["I", "II", "III", "Prime", "Star", "One", "Nova"]
PLANETS = ["Earth", "Mars", "Jupiter", "Saturn", "Neptune", "Venus", "Titan", "Europa", "Kepler-22b"]

FIRST_YEAR = 2801
LAST_YEAR = 3018


# ==============================================================================
# Fleet Generation
# ==============================================================================


def generate_draft() -> ShipDraft:
    """One random, valid ship draft."""
    year = random.randint(FIRST_YEAR, LAST_YEAR)
    production_date = datetime(
        year,
        random.randint(1, 12),
        random.randint(1, 28),
        random.randint(0, 23),
        tzinfo=timezone.utc,
    )

    return ShipDraft(
        name=f"{random.choice(PREFIXES)} {random.choice(SUFFIXES)}",
        planet=random.choice(PLANETS),
        ship_type=random.choice(list(ShipType)).value,
        production_date=production_date,
        is_used=random.random() < 0.4,
        speed=random.uniform(0.01, 0.98),
        crew_size=random.randint(1, 9998),
    )


def seed_ships(num_ships: int = NUM_SHIPS, seed: int = RANDOM_SEED) -> None:
    """
    Replace the fleet with freshly generated ships.

    Args:
        num_ships: Number of ships to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"Seeding database with {num_ships} ships (seed={seed})...")

    with get_session() as session:
        deleted = session.execute(delete(ShipRow)).rowcount
        print(f"   Deleted {deleted} existing ships")

        create_ship = CreateShip(ship_repository=PostgresShipRepository(session))
        ships = [create_ship.execute(generate_draft()) for _ in range(num_ships)]

        print(f"Seeded {len(ships)} ships")

        for ship in ships[:5]:
            print(
                f"   #{ship.id} {ship.name} ({ship.ship_type.value}, {ship.planet}) "
                f"{ship.production_date.year} speed={ship.speed} rating={ship.rating}"
            )

        if len(ships) > 5:
            print(f"   ... and {len(ships) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_ships()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
