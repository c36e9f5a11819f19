"""
SRD reference content for initiative.

Read-only lookup tables for spells, items, item categories and magic items,
plus the Open Game License notice. Nothing in the application mutates these.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class SrdKind(str, Enum):
    """Kinds of reference entry."""

    SPELL = "spell"
    ITEM = "item"
    ITEM_CATEGORY = "item category"
    MAGIC_ITEM = "magic item"


class SrdEntry(BaseModel):
    """A single reference entry."""

    name: str = Field(min_length=1)
    kind: SrdKind
    text: str
    members: list[str] = Field(default_factory=list, description="Items in a category")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        lines = [f"# {self.name}", self.text]
        if self.members:
            lines.append("\n".join(f"* {member}" for member in self.members))
        return "\n\n".join(lines)


SPELLS: list[SrdEntry] = [
    SrdEntry(
        name="Bless",
        kind=SrdKind.SPELL,
        text="*1st-level enchantment*\n\nUp to three creatures add 1d4 to attack rolls "
        "and saving throws for the duration.",
    ),
    SrdEntry(
        name="Cure Wounds",
        kind=SrdKind.SPELL,
        text="*1st-level evocation*\n\nA creature you touch regains hit points equal to "
        "1d8 + your spellcasting ability modifier.",
    ),
    SrdEntry(
        name="Detect Magic",
        kind=SrdKind.SPELL,
        text="*1st-level divination (ritual)*\n\nFor the duration, you sense the presence "
        "of magic within 30 feet of you.",
    ),
    SrdEntry(
        name="Fireball",
        kind=SrdKind.SPELL,
        text="*3rd-level evocation*\n\nEach creature in a 20-foot-radius sphere makes a "
        "Dexterity saving throw, taking 8d6 fire damage on a failed save, or half as "
        "much on a successful one.",
    ),
    SrdEntry(
        name="Light",
        kind=SrdKind.SPELL,
        text="*Evocation cantrip*\n\nYou touch one object that is no larger than 10 feet "
        "in any dimension. It sheds bright light in a 20-foot radius.",
    ),
    SrdEntry(
        name="Mage Hand",
        kind=SrdKind.SPELL,
        text="*Conjuration cantrip*\n\nA spectral, floating hand appears at a point you "
        "choose within range.",
    ),
    SrdEntry(
        name="Magic Missile",
        kind=SrdKind.SPELL,
        text="*1st-level evocation*\n\nYou create three glowing darts of magical force. "
        "Each dart deals 1d4 + 1 force damage to its target.",
    ),
    SrdEntry(
        name="Shield",
        kind=SrdKind.SPELL,
        text="*1st-level abjuration*\n\nAn invisible barrier of magical force appears and "
        "protects you. Until the start of your next turn, you have a +5 bonus to AC.",
    ),
    SrdEntry(
        name="Sleep",
        kind=SrdKind.SPELL,
        text="*1st-level enchantment*\n\nRoll 5d8; the total is how many hit points of "
        "creatures this spell can affect.",
    ),
]

ITEMS: list[SrdEntry] = [
    SrdEntry(name="Backpack", kind=SrdKind.ITEM, text="*Adventuring gear*\n\n2 gp, 5 lb."),
    SrdEntry(
        name="Chain Mail",
        kind=SrdKind.ITEM,
        text="*Heavy armor*\n\n75 gp, AC 16, Strength 13, stealth disadvantage, 55 lb.",
    ),
    SrdEntry(
        name="Dagger",
        kind=SrdKind.ITEM,
        text="*Simple melee weapon*\n\n2 gp, 1d4 piercing, finesse, light, thrown (20/60).",
    ),
    SrdEntry(
        name="Leather Armor",
        kind=SrdKind.ITEM,
        text="*Light armor*\n\n10 gp, AC 11 + Dex modifier, 10 lb.",
    ),
    SrdEntry(
        name="Longsword",
        kind=SrdKind.ITEM,
        text="*Martial melee weapon*\n\n15 gp, 1d8 slashing, versatile (1d10), 3 lb.",
    ),
    SrdEntry(
        name="Rope, Hempen (50 feet)",
        kind=SrdKind.ITEM,
        text="*Adventuring gear*\n\n1 gp, 10 lb.",
    ),
    SrdEntry(name="Shield", kind=SrdKind.ITEM, text="*Shield*\n\n10 gp, AC +2, 6 lb."),
    SrdEntry(
        name="Shortsword",
        kind=SrdKind.ITEM,
        text="*Martial melee weapon*\n\n10 gp, 1d6 piercing, finesse, light, 2 lb.",
    ),
    SrdEntry(name="Torch", kind=SrdKind.ITEM, text="*Adventuring gear*\n\n1 cp, 1 lb."),
]

ITEM_CATEGORIES: list[SrdEntry] = [
    SrdEntry(
        name="Adventuring Gear",
        kind=SrdKind.ITEM_CATEGORY,
        text="Everyday equipment for life on the road.",
        members=["Backpack", "Rope, Hempen (50 feet)", "Torch"],
    ),
    SrdEntry(
        name="Armor",
        kind=SrdKind.ITEM_CATEGORY,
        text="Protective gear worn on the body.",
        members=["Chain Mail", "Leather Armor"],
    ),
    SrdEntry(
        name="Shields",
        kind=SrdKind.ITEM_CATEGORY,
        text="Carried in one hand for protection.",
        members=["Shield"],
    ),
    SrdEntry(
        name="Weapons",
        kind=SrdKind.ITEM_CATEGORY,
        text="Simple and martial weapons.",
        members=["Dagger", "Longsword", "Shortsword"],
    ),
]

MAGIC_ITEMS: list[SrdEntry] = [
    SrdEntry(
        name="Bag of Holding",
        kind=SrdKind.MAGIC_ITEM,
        text="*Wondrous item, uncommon*\n\nThis bag has an interior space considerably "
        "larger than its outside dimensions.",
    ),
    SrdEntry(
        name="Cloak of Elvenkind",
        kind=SrdKind.MAGIC_ITEM,
        text="*Wondrous item, uncommon (requires attunement)*\n\nWhile you wear this "
        "cloak with its hood up, Wisdom (Perception) checks made to see you have "
        "disadvantage.",
    ),
    SrdEntry(
        name="Deck of Many Things",
        kind=SrdKind.MAGIC_ITEM,
        text="*Wondrous item, legendary*\n\nUsually found in a box or pouch, this deck "
        "contains a number of cards made of ivory or vellum.",
    ),
    SrdEntry(
        name="Ring of Protection",
        kind=SrdKind.MAGIC_ITEM,
        text="*Ring, rare (requires attunement)*\n\nYou gain a +1 bonus to AC and saving "
        "throws while wearing this ring.",
    ),
    SrdEntry(
        name="Wand of Magic Missiles",
        kind=SrdKind.MAGIC_ITEM,
        text="*Wand, uncommon*\n\nThis wand has 7 charges. While holding it, you can "
        "expend 1 or more of its charges to cast the magic missile spell.",
    ),
]

OPEN_GAME_LICENSE = """\
# OPEN GAME LICENSE Version 1.0a

The following text is the property of Wizards of the Coast, Inc. and is \
Copyright 2000 Wizards of the Coast, Inc ("Wizards"). All Rights Reserved.

System Reference Document 5.1 Copyright 2016, Wizards of the Coast, Inc.; \
Authors Mike Mearls, Jeremy Crawford, Chris Perkins, Rodney Thompson, Peter Lee, \
James Wyatt, Robert J. Schwalb, Bruce R. Cordell, Chris Sims, and Steve Townshend, \
based on original material by E. Gary Gygax and Dave Arneson."""

_TABLES: dict[SrdKind, list[SrdEntry]] = {
    SrdKind.SPELL: SPELLS,
    SrdKind.ITEM: ITEMS,
    SrdKind.ITEM_CATEGORY: ITEM_CATEGORIES,
    SrdKind.MAGIC_ITEM: MAGIC_ITEMS,
}


def words(kind: SrdKind) -> list[str]:
    """Names of every entry of one kind, for autocomplete."""
    return [entry.name for entry in _TABLES[kind]]


def lookup(kind: SrdKind, name: str) -> SrdEntry | None:
    """Case-insensitive exact lookup by name."""
    name = name.strip().lower()
    for entry in _TABLES[kind]:
        if entry.name.lower() == name:
            return entry
    return None


def spell_index() -> str:
    """Markdown listing of every spell."""
    lines = ["# Spells"]
    lines.extend(f"* `{spell.name}`" for spell in SPELLS)
    return "\n".join(lines)
