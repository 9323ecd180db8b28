"""The 26 verbs of the reference game.

Each verb is lettered A to Z in index order. Two verbs, Mine and Chop Trees,
cost nothing and only produce ("freebies").
"""

from __future__ import annotations

from orchestrate.core.catalog import Catalog, CatalogBuilder
from orchestrate.game.resources import SCORE_RESOURCE, Resource

VERB_COUNT = 26

FREEBIE_LETTERS = ("M", "T")


def build_reference_catalog() -> Catalog:
    """Build the reference game catalog."""
    R = Resource
    b = CatalogBuilder(Resource, score_resource=SCORE_RESOURCE)

    b.action("A", "Trade").with_(R.Buildings, -25).with_(R.Food, -25).with_(R.Joy, 25)
    (
        b.action("B", "Build")
        .with_(R.Stone, -25)
        .with_(R.Wood, -25)
        .with_(R.Tools, -25)
        .with_(R.Buildings, 75)
    )
    (
        b.action("C", "Cook")
        .with_(R.Wood, -25)
        .with_(R.Buildings, -25)
        .with_(R.Ingredients, -25)
        .with_(R.Food, 75)
    )
    (
        b.action("D", "Make Medicine")
        .with_(R.Buildings, -25)
        .with_(R.Herbs, -25)
        .with_(R.People, 100)
        .with_(R.Knowledge, -25)
    )
    b.action("E", "Procreate").with_(R.Food, -75).with_(R.People, 75)
    b.action("F", "Fish").with_(R.Tools, -25).with_(R.Ingredients, 25)
    b.action("G", "Forage").with_(R.Tools, -50).with_(R.Ingredients, 25).with_(R.Herbs, 25)
    b.action("H", "Hunt").with_(R.Tools, -25).with_(R.Ingredients, 25)
    (
        b.action("I", "Make Machinery")
        .with_(R.Tools, -25)
        .with_(R.Buildings, -25)
        .with_(R.Knowledge, -25)
        .with_(R.Machinery, 75)
    )
    (
        b.action("J", "Make Energy")
        .with_(R.Tools, -25)
        .with_(R.Buildings, -25)
        .with_(R.Knowledge, -25)
        .with_(R.Energy, 100)
    )
    b.action("K", "Make Tools").with_(R.Stone, -25).with_(R.Wood, -25).with_(R.Tools, 50)
    b.action("L", "Raise Cattle").with_(R.Buildings, -25).with_(R.Food, 75).with_(R.People, -25)
    b.action("M", "Mine").with_(R.Stone, 50)
    (
        b.action("N", "3D Print")
        .with_(R.Tools, 75)
        .with_(R.Buildings, 75)
        .with_(R.Knowledge, -25)
        .with_(R.Energy, -25)
        .with_(R.Computers, -25)
    )
    (
        b.action("O", "Compute")
        .with_(R.Buildings, -25)
        .with_(R.Knowledge, -25)
        .with_(R.Energy, -25)
        .with_(R.Machinery, -25)
        .with_(R.Computers, 100)
    )
    (
        b.action("P", "Farm")
        .with_(R.Tools, -25)
        .with_(R.Buildings, -25)
        .with_(R.Herbs, 25)
        .with_(R.Food, 25)
    )
    (
        b.action("Q", "Innovate")
        .with_(R.Knowledge, -25)
        .with_(R.Books, -25)
        .with_(R.Machinery, 50)
        .with_(R.Computers, 50)
    )
    b.action("R", "Repair").with_(R.Tools, 25).with_(R.Buildings, 25).with_(R.People, -25)
    (
        b.action("S", "Socialize")
        .with_(R.People, -25)
        .with_(R.Energy, -25)
        .with_(R.Computers, -25)
        .with_(R.Joy, 100)
    )
    b.action("T", "Chop Trees").with_(R.Wood, 50)
    b.action("U", "Teach").with_(R.People, -75).with_(R.Knowledge, 75)
    b.action("V", "Write").with_(R.Knowledge, -25).with_(R.Books, 50)
    (
        b.action("W", "Brew")
        .with_(R.Buildings, -25)
        .with_(R.Herbs, -25)
        .with_(R.People, -25)
        .with_(R.Joy, 75)
    )
    b.action("X", "Luxuriate").with_(R.Joy, -50).with_(R.Points, 25)
    (
        b.action("Y", "Recycle")
        .with_(R.Stone, 50)
        .with_(R.Wood, 50)
        .with_(R.Buildings, -25)
        .with_(R.People, -25)
    )
    (
        b.action("Z", "Read")
        .with_(R.People, -25)
        .with_(R.Knowledge, 50)
        .with_(R.Books, -25)
        .with_(R.Joy, 50)
    )

    return b.build()


REFERENCE_CATALOG = build_reference_catalog()
