"""Resource kinds of the reference game."""

from enum import IntEnum


class Resource(IntEnum):
    """The 15 tracked resources. Values index every delta vector."""

    Stone = 0
    Wood = 1
    Tools = 2
    Buildings = 3
    Ingredients = 4
    Herbs = 5
    Food = 6
    People = 7
    Knowledge = 8
    Books = 9
    Energy = 10
    Machinery = 11
    Computers = 12
    Joy = 13
    Points = 14


SCORE_RESOURCE = Resource.Points
