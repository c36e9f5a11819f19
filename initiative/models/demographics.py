"""
Demographics for initiative.

Weighted categorical tables that drive randomized choices during generation.
Tables are keyed by colon-separated names; a lookup for "age:dwarf" falls back
to "age" when no dwarf-specific table exists.
"""

from __future__ import annotations

import random

from pydantic import BaseModel, Field


class ConfigurationError(Exception):
    """A demographics table cannot be sampled (missing, negative or zero weight)."""


class Demographics(BaseModel):
    """Weighted distribution tables, resolved by key specificity."""

    tables: dict[str, dict[str, float]] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @classmethod
    def default(cls) -> Demographics:
        """The stock tables used when a session starts."""
        return cls(
            tables={
                "species": {
                    "human": 60.0,
                    "dwarf": 15.0,
                    "elf": 15.0,
                    "warforged": 10.0,
                },
                "gender": {
                    "feminine": 48.0,
                    "masculine": 48.0,
                    "nonbinary": 4.0,
                },
                "gender:warforged": {
                    "neuter": 80.0,
                    "feminine": 8.0,
                    "masculine": 8.0,
                    "nonbinary": 4.0,
                },
                "age": {
                    "child": 10.0,
                    "adolescent": 8.0,
                    "young adult": 20.0,
                    "adult": 32.0,
                    "middle-aged": 18.0,
                    "elderly": 12.0,
                },
                # Warforged are constructed as adults and do not age visibly.
                "age:warforged": {
                    "young adult": 30.0,
                    "adult": 70.0,
                },
            }
        )

    def resolve_key(self, table_key: str) -> str | None:
        """
        Find the most specific table available for a key.

        "age:dwarf:hill" tries "age:dwarf:hill", then "age:dwarf", then "age".
        """
        parts = table_key.split(":")
        while parts:
            key = ":".join(parts)
            if key in self.tables:
                return key
            parts.pop()
        return None

    def get_table(self, table_key: str) -> dict[str, float]:
        """Get the resolved table for a key, raising if none exists."""
        key = self.resolve_key(table_key)
        if key is None:
            raise ConfigurationError(f"No demographics table for '{table_key}'")
        return self.tables[key]

    def weighted_choice(self, rng: random.Random, table_key: str) -> str:
        """
        Sample a category from the table resolved for table_key.

        Args:
            rng: Random source; a seeded source gives reproducible results
            table_key: Table name, e.g. "gender:warforged"

        Returns:
            The chosen category

        Raises:
            ConfigurationError: If the table is missing, has a negative weight,
                or has a total weight of zero
        """
        table = self.get_table(table_key)

        negative = [category for category, weight in table.items() if weight < 0]
        if negative:
            raise ConfigurationError(
                f"Negative weight for {', '.join(negative)} in '{table_key}'"
            )

        total = sum(table.values())
        if total <= 0:
            raise ConfigurationError(f"Demographics table '{table_key}' has zero total weight")

        categories = list(table)
        weights = [table[category] for category in categories]
        return rng.choices(categories, weights=weights, k=1)[0]

    def with_weight(self, table_key: str, category: str, weight: float) -> Demographics:
        """
        Return a copy with one category's weight replaced.

        Writes into the exact table named by table_key, creating it from the
        resolved fallback table if needed.
        """
        if weight < 0:
            raise ConfigurationError(f"Negative weight for {category} in '{table_key}'")

        tables = {key: dict(table) for key, table in self.tables.items()}
        if table_key not in tables:
            fallback = self.resolve_key(table_key)
            tables[table_key] = dict(self.tables[fallback]) if fallback else {}
        tables[table_key][category] = weight
        return Demographics(tables=tables)
