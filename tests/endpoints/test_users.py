from fastapi.testclient import TestClient
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from beerlog.models.user_profile import UserProfile


def create_test_user(db: Session, cognito_sub: str = "test-user-sub") -> UserProfile:
    """Helper function to create a test user profile"""
    profile = UserProfile(
        cognito_sub=cognito_sub,
        display_name="Test User",
        icon_url="https://example.com/icon.png",
    )
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def get_auth_header(cognito_sub: str = "test-user-sub"):
    """Helper function to build the gateway identity header"""
    return {"X-Cognito-Sub": cognito_sub}


def test_create_user_profiles_table(db: Session):
    """
    Test that the profile table exists in the database
    """
    inspector = inspect(db.bind)
    tables = inspector.get_table_names()

    assert "user_profiles" in tables


def test_read_profile(db: Session, client: TestClient):
    """Test getting the current user's profile"""
    profile = create_test_user(db)

    response = client.get("/api/v1/users/profile", headers=get_auth_header())

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == profile.id
    assert data["cognito_sub"] == "test-user-sub"
    assert data["display_name"] == "Test User"
    assert data["icon_url"] == "https://example.com/icon.png"


def test_read_profile_unauthorized(client: TestClient):
    """Test accessing the profile without identity"""
    response = client.get("/api/v1/users/profile")

    assert response.status_code == 401
    assert response.json()["detail"] == {
        "error": "Authentication required",
        "code": "UNAUTHORIZED",
    }


def test_read_profile_not_found(client: TestClient):
    response = client.get("/api/v1/users/profile", headers=get_auth_header("new-sub"))

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "PROFILE_NOT_FOUND"


def test_create_profile(db: Session, client: TestClient):
    """Test creating a profile for a new identity"""
    response = client.post(
        "/api/v1/users/profile",
        json={"display_name": "  Beer Lover  "},
        headers=get_auth_header("new-sub"),
    )

    assert response.status_code == 201
    data = response.json()
    assert data["cognito_sub"] == "new-sub"
    assert data["display_name"] == "Beer Lover"
    assert data["icon_url"] is None

    profile = db.query(UserProfile).filter(UserProfile.cognito_sub == "new-sub").first()
    assert profile is not None


def test_create_profile_twice(db: Session, client: TestClient):
    create_test_user(db)

    response = client.post(
        "/api/v1/users/profile",
        json={"display_name": "Someone Else"},
        headers=get_auth_header(),
    )

    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "PROFILE_EXISTS"


def test_create_profile_validation(client: TestClient):
    """Test display name rules"""
    for display_name in ("", "   ", "x" * 51):
        response = client.post(
            "/api/v1/users/profile",
            json={"display_name": display_name},
            headers=get_auth_header("new-sub"),
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "INVALID_PARAMETER"


def test_create_profile_unauthorized(client: TestClient):
    response = client.post("/api/v1/users/profile", json={"display_name": "Anonymous"})

    assert response.status_code == 401
