from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from beerlog.models.brewery import Brewery
from beerlog.models.user_profile import UserProfile
from beerlog.models.visit import Visit
from beerlog.repositories.visit_repository import VisitRepository

START = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def create_test_user(db: Session, cognito_sub: str = "test-user-sub") -> UserProfile:
    """Helper function to create a test user profile"""
    profile = UserProfile(cognito_sub=cognito_sub, display_name="Test User")
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def create_test_brewery(db: Session, name: str = "Test Brewery") -> Brewery:
    brewery = Brewery(name=name, latitude=35.0, longitude=135.0)
    db.add(brewery)
    db.commit()
    db.refresh(brewery)
    return brewery


def create_visits(db: Session, profile: UserProfile, breweries, count: int):
    """Helper function to record visits two hours apart, cycling breweries"""
    visits = []
    for i in range(count):
        brewery = breweries[i % len(breweries)]
        at = START + timedelta(hours=2 * i)
        visit = Visit(
            user_profile_id=profile.id,
            brewery_id=brewery.id,
            brewery_name=brewery.name,
            brewery_latitude=brewery.latitude,
            brewery_longitude=brewery.longitude,
        )
        visits.append(VisitRepository(db, clock=lambda at=at: at).create(visit))
    return visits


def get_auth_header(cognito_sub: str = "test-user-sub"):
    return {"X-Cognito-Sub": cognito_sub}


def test_get_visits(db: Session, client: TestClient):
    """Test the history lists the caller's visits newest first"""
    profile = create_test_user(db)
    brewery = create_test_brewery(db)
    visits = create_visits(db, profile, [brewery], 3)

    response = client.get("/api/v1/visits", headers=get_auth_header())

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert [v["id"] for v in data["visits"]] == [v.id for v in reversed(visits)]
    assert data["visits"][0]["brewery"]["name"] == "Test Brewery"
    assert data["visits"][0]["visited_at"].startswith("2024-05-01T16:00:00")


def test_get_visits_empty(db: Session, client: TestClient):
    create_test_user(db)

    response = client.get("/api/v1/visits", headers=get_auth_header())

    assert response.status_code == 200
    assert response.json() == {"visits": [], "total": 0}


def test_get_visits_only_own(db: Session, client: TestClient):
    """Test visits of other users are not listed"""
    profile = create_test_user(db)
    other = create_test_user(db, "other-user")
    brewery = create_test_brewery(db)
    create_visits(db, profile, [brewery], 2)
    create_visits(db, other, [brewery], 3)

    response = client.get("/api/v1/visits", headers=get_auth_header())

    data = response.json()
    assert data["total"] == 2
    assert all(v["user_profile_id"] == profile.id for v in data["visits"])


def test_get_visits_pagination(db: Session, client: TestClient):
    profile = create_test_user(db)
    brewery = create_test_brewery(db)
    visits = create_visits(db, profile, [brewery], 5)

    response = client.get("/api/v1/visits?limit=2&offset=2", headers=get_auth_header())

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 5
    assert [v["id"] for v in data["visits"]] == [visits[2].id, visits[1].id]


def test_get_visits_clamps_paging(db: Session, client: TestClient):
    """Test out-of-range limit and offset values fall back to sane ones"""
    profile = create_test_user(db)
    brewery = create_test_brewery(db)
    create_visits(db, profile, [brewery], 3)

    for query in ("limit=0", "limit=-5", "limit=1000", "offset=-3"):
        response = client.get(f"/api/v1/visits?{query}", headers=get_auth_header())

        assert response.status_code == 200
        assert len(response.json()["visits"]) == 3


def test_get_visits_filter_by_brewery(db: Session, client: TestClient):
    profile = create_test_user(db)
    brewery1 = create_test_brewery(db, "Brewery 1")
    brewery2 = create_test_brewery(db, "Brewery 2")
    create_visits(db, profile, [brewery1, brewery2], 5)

    response = client.get(
        f"/api/v1/visits?brewery_id={brewery2.id}", headers=get_auth_header()
    )

    data = response.json()
    assert data["total"] == 2
    assert all(v["brewery_id"] == brewery2.id for v in data["visits"])

    # Non-positive brewery ids mean no filter
    response = client.get("/api/v1/visits?brewery_id=0", headers=get_auth_header())
    assert response.json()["total"] == 5


def test_get_visits_unauthenticated(client: TestClient):
    response = client.get("/api/v1/visits")

    assert response.status_code == 401


def test_get_visit(db: Session, client: TestClient):
    profile = create_test_user(db)
    brewery = create_test_brewery(db)
    visit = create_visits(db, profile, [brewery], 1)[0]

    response = client.get(f"/api/v1/visits/{visit.id}", headers=get_auth_header())

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == visit.id
    assert data["brewery_name"] == "Test Brewery"


def test_get_visit_of_other_user(db: Session, client: TestClient):
    """Test reading someone else's visit is forbidden"""
    create_test_user(db)
    other = create_test_user(db, "other-user")
    brewery = create_test_brewery(db)
    visit = create_visits(db, other, [brewery], 1)[0]

    response = client.get(f"/api/v1/visits/{visit.id}", headers=get_auth_header())

    assert response.status_code == 403
    assert response.json()["detail"]["code"] == "FORBIDDEN"


def test_get_visit_not_found(db: Session, client: TestClient):
    create_test_user(db)

    response = client.get("/api/v1/visits/999", headers=get_auth_header())

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "VISIT_NOT_FOUND"


def test_get_visits_out_of_range_params(db: Session, client: TestClient):
    """Test huge ids and offsets never reach the database driver"""
    create_test_user(db)

    response = client.get(f"/api/v1/visits/{10**30}", headers=get_auth_header())
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "INVALID_PARAMETER"

    response = client.get(f"/api/v1/visits?brewery_id={10**30}", headers=get_auth_header())
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "INVALID_PARAMETER"

    response = client.get(f"/api/v1/visits?offset={10**30}", headers=get_auth_header())
    assert response.status_code == 200
    assert response.json() == {"visits": [], "total": 0}


def test_get_visit_invalid_id(db: Session, client: TestClient):
    create_test_user(db)

    response = client.get("/api/v1/visits/0", headers=get_auth_header())

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "INVALID_PARAMETER"
