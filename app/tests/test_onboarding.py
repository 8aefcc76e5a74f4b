"""Tests du questionnaire d'onboarding"""

from app.models.user_profile import UserProfile


def _full_form(**overrides):
    form = {
        "name": "Priya",
        "household_size": "4+",
        "dietary_style": ["Vegetarian", "Gluten-free"],
        "allergies": ["Dairy"],
        "spice": "Spicy 🔥",
        "dislikes": "no mushrooms",
        "cuisines": ["South Asian", "Mexican"],
        "cook_time": "30–45 minutes",
        "comfort_level": "Confident",
        "want_to_grow": "No, I'm happy with what I know",
    }
    form.update(overrides)
    return form


def test_status_requires_session(client):
    response = client.get("/api/v1/onboarding")
    assert response.status_code == 401


def test_status_without_profile(client, auth_headers):
    response = client.get("/api/v1/onboarding", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["completed"] is False
    assert response.json()["profile"] is None


def test_status_with_profile_skips_wizard(client, auth_headers, test_profile):
    """Un profil existant affiche directement l'état terminé"""
    response = client.get("/api/v1/onboarding", headers=auth_headers)
    data = response.json()
    assert data["completed"] is True
    assert data["profile"]["name"] == "Sam"
    assert data["redirect_to"] == "/feed"


def test_options(client):
    data = client.get("/api/v1/onboarding/options").json()
    assert data["total_steps"] == 4
    assert data["household_sizes"] == ["1", "2", "3", "4+"]
    assert "Halal" in data["dietary_styles"]
    assert "Caribbean" in data["cuisines"]


def test_complete_onboarding(client, auth_headers, db, test_user):
    response = client.post(
        "/api/v1/onboarding/profile", headers=auth_headers, json=_full_form()
    )
    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == test_user.id
    assert data["dietary_style"] == ["Vegetarian", "Gluten-free"]
    assert data["cuisines"] == ["South Asian", "Mexican"]

    stored = db.query(UserProfile).filter(UserProfile.user_id == test_user.id).one()
    assert stored.allergies == ["Dairy"]


def test_onboarding_without_dietary_style(client, auth_headers, db, test_user):
    """Aucun style alimentaire choisi: séquence vide"""
    response = client.post(
        "/api/v1/onboarding/profile",
        headers=auth_headers,
        json=_full_form(dietary_style=[]),
    )
    assert response.status_code == 201
    assert response.json()["dietary_style"] == []

    stored = db.query(UserProfile).filter(UserProfile.user_id == test_user.id).one()
    assert stored.dietary_style == []


def test_onboarding_empty_form_is_accepted(client, auth_headers):
    """Aucune étape n'est bloquante"""
    response = client.post("/api/v1/onboarding/profile", headers=auth_headers, json={})
    assert response.status_code == 201
    assert response.json()["name"] == ""


def test_values_with_commas_survive(client, auth_headers):
    response = client.post(
        "/api/v1/onboarding/profile",
        headers=auth_headers,
        json=_full_form(cuisines=["Fusion, Korean-Mexican", "Italian"]),
    )
    assert response.json()["cuisines"] == ["Fusion, Korean-Mexican", "Italian"]


def test_second_submission_rejected(client, auth_headers, test_profile, db):
    response = client.post(
        "/api/v1/onboarding/profile", headers=auth_headers, json=_full_form()
    )
    assert response.status_code == 409
    assert db.query(UserProfile).count() == 1


def test_wizard_next_and_progress(client):
    response = client.post(
        "/api/v1/onboarding/wizard", json={"action": {"type": "next"}}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["state"]["step"] == 2
    assert data["progress"] == 50
    assert data["is_last_step"] is False


def test_wizard_toggle(client):
    response = client.post(
        "/api/v1/onboarding/wizard",
        json={
            "state": {"step": 2, "form": {"allergies": ["Nuts"]}},
            "action": {"type": "toggle", "field": "allergies", "value": "Soy"},
        },
    )
    assert response.json()["state"]["form"]["allergies"] == ["Nuts", "Soy"]


def test_wizard_rejects_unknown_field(client):
    response = client.post(
        "/api/v1/onboarding/wizard",
        json={"action": {"type": "set", "field": "user_id", "value": "1"}},
    )
    assert response.status_code == 422


def test_concurrent_duplicate_hits_unique_constraint(
    client, auth_headers, db, test_user, monkeypatch
):
    """Deux soumissions qui passent la vérification: la contrainte d'unicité tranche"""
    from app.services.profile_service import ProfileService

    monkeypatch.setattr(ProfileService, "has_profile", lambda self, user_id: False)

    first = client.post(
        "/api/v1/onboarding/profile", headers=auth_headers, json=_full_form()
    )
    assert first.status_code == 201

    second = client.post(
        "/api/v1/onboarding/profile", headers=auth_headers, json=_full_form()
    )
    assert second.status_code == 409
    assert db.query(UserProfile).filter(UserProfile.user_id == test_user.id).count() == 1
