"""Tests de la saisie admin des promotions"""

from app.models.deal import Deal


def test_admin_wrong_password(client):
    response = client.post("/api/v1/admin/session", json={"password": "letmein"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Wrong password"
    assert "admin_token" not in response.json()


def test_admin_correct_password(client):
    response = client.post(
        "/api/v1/admin/session", json={"password": "grocerydeals2026"}
    )
    assert response.status_code == 200
    token = response.json()["admin_token"]

    options = client.get(
        "/api/v1/admin/options", headers={"Authorization": f"Bearer {token}"}
    )
    assert options.status_code == 200
    assert "No Frills" in options.json()["stores"]
    assert "Dairy & Eggs" in options.json()["categories"]


def test_admin_endpoints_closed_without_token(client, deal_payload):
    assert client.get("/api/v1/admin/options").status_code == 401
    assert client.post("/api/v1/admin/deals", json=deal_payload).status_code == 401


def test_user_token_is_not_admin(client, auth_headers, deal_payload):
    response = client.post(
        "/api/v1/admin/deals", headers=auth_headers, json=deal_payload
    )
    assert response.status_code == 403


def test_create_deal_resets_form(client, admin_headers, deal_payload, db):
    """Après sauvegarde: magasin, catégorie et dates conservés"""
    response = client.post(
        "/api/v1/admin/deals", headers=admin_headers, json=deal_payload
    )
    assert response.status_code == 201
    data = response.json()

    assert data["saved"] is True
    assert data["deal"]["sale_price"] == 9.99
    assert data["deal"]["regular_price"] == 14.99
    assert data["deal"]["discount_percent"] == 33

    form = data["form"]
    assert form["store"] == "FreshCo"
    assert form["category"] == "Pantry"
    assert form["valid_from"] == deal_payload["valid_from"]
    assert form["valid_to"] == deal_payload["valid_to"]
    assert form["product_name"] == ""
    assert form["sale_price"] == ""
    assert form["regular_price"] == ""
    assert form["unit"] == ""

    assert db.query(Deal).count() == 1


def test_empty_regular_price_is_null(client, admin_headers, deal_payload, db):
    deal_payload["regular_price"] = ""
    response = client.post(
        "/api/v1/admin/deals", headers=admin_headers, json=deal_payload
    )
    assert response.status_code == 201
    assert response.json()["deal"]["regular_price"] is None
    assert db.query(Deal).one().regular_price is None


def test_duplicate_deals_are_allowed(client, admin_headers, deal_payload, db):
    for _ in range(2):
        response = client.post(
            "/api/v1/admin/deals", headers=admin_headers, json=deal_payload
        )
        assert response.status_code == 201
    assert db.query(Deal).count() == 2


def test_create_deal_validation(client, admin_headers, deal_payload):
    for field, value in [
        ("store", "Costco"),
        ("category", "Toys"),
        ("sale_price", ""),
        ("sale_price", "abc"),
        ("product_name", "   "),
        ("valid_to", "2020-01-01"),
    ]:
        payload = dict(deal_payload, **{field: value})
        response = client.post(
            "/api/v1/admin/deals", headers=admin_headers, json=payload
        )
        assert response.status_code == 422, (field, value)


def test_admin_not_configured(client, monkeypatch, admin_headers, deal_payload):
    """Sans mot de passe admin configuré, l'accès admin est indisponible"""
    from app.core.config import settings

    monkeypatch.setattr(settings, "ADMIN_PASSWORD", None)

    response = client.post("/api/v1/admin/session", json={"password": "anything"})
    assert response.status_code == 503
    assert response.json()["detail"] == "Admin access is not configured"

    response = client.post(
        "/api/v1/admin/deals", headers=admin_headers, json=deal_payload
    )
    assert response.status_code == 503
