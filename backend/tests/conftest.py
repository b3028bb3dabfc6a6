import pytest

from blueprint.layout import Floor, HouseLayout, Land, Room
from blueprint.scale import BlueprintScale


def _room(name, x, y, width, height, id=None, color=None):
    return Room(id=id or f"{name.lower().replace(' ', '_')}_{x}_{y}", name=name,
                x=x, y=y, width=width, height=height, color=color)


@pytest.fixture
def room():
    return _room


@pytest.fixture
def make_layout():
    def build(*floors_rooms, land=(75, 60)):
        return HouseLayout(
            land=Land(width=land[0], height=land[1]),
            floors=[
                Floor(id=f"floor_{i + 1}", name=f"Floor {i + 1}", rooms=list(rooms))
                for i, rooms in enumerate(floors_rooms)
            ],
        )
    return build


@pytest.fixture
def scale():
    return BlueprintScale.for_land(Land(width=75, height=60), 900)
