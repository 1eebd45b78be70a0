import pytest
from sqlalchemy.orm import Session

from beerlog.core.errors import BreweryNotFound, InvalidArgument, InvalidCoordinate
from beerlog.schemas.brewery import BreweryCreate
from beerlog.services.brewery_service import brewery_service, build_brewery


def test_build_brewery_trims_fields():
    brewery = build_brewery("  Test Brewery ", " Kyoto ", None, 35.0, 135.0)

    assert brewery.name == "Test Brewery"
    assert brewery.address == "Kyoto"
    assert brewery.description == ""
    assert brewery.latitude == 35.0


def test_build_brewery_name_rules():
    with pytest.raises(InvalidArgument):
        build_brewery("", None, None, 35.0, 135.0)

    with pytest.raises(InvalidArgument):
        build_brewery("x" * 256, None, None, 35.0, 135.0)

    assert build_brewery("x" * 255, None, None, 35.0, 135.0).name == "x" * 255


def test_build_brewery_address_too_long():
    with pytest.raises(InvalidArgument):
        build_brewery("Test Brewery", "a" * 513, None, 35.0, 135.0)


@pytest.mark.parametrize(
    "latitude,longitude",
    [(0.0, 135.0), (35.0, 0.0), (90.1, 135.0), (35.0, -180.1)],
)
def test_build_brewery_invalid_location(latitude, longitude):
    with pytest.raises(InvalidCoordinate):
        build_brewery("Test Brewery", None, None, latitude, longitude)


def test_create_and_get_brewery(db: Session):
    brewery_in = BreweryCreate(name="Test Brewery", latitude=35.0, longitude=135.0)

    created = brewery_service.create_brewery(db, brewery_in)
    fetched = brewery_service.get_brewery(db, created.id)

    assert fetched.id == created.id
    assert fetched.name == "Test Brewery"


def test_get_brewery_errors(db: Session):
    with pytest.raises(InvalidArgument):
        brewery_service.get_brewery(db, 0)

    with pytest.raises(BreweryNotFound) as exc_info:
        brewery_service.get_brewery(db, 42)

    assert exc_info.value.code == "BREWERY_NOT_FOUND"
