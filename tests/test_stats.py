"""Tests for the inventory statistics endpoint."""
import pytest

from inventory_api.services.bootstrap import SAMPLE_PRODUCTS


def test_stats_empty(client):
    """Test an empty table reports all zeros."""
    response = client.get("/api/stats")

    assert response.status_code == 200
    assert response.json() == {
        "total_products": 0,
        "total_items": 0,
        "categories": 0,
        "total_value": 0
    }


def test_stats_seeded(seeded_client):
    """Test stats over the sample rows match sums computed directly."""
    response = seeded_client.get("/api/stats")

    assert response.status_code == 200
    data = response.json()
    assert data["total_products"] == len(SAMPLE_PRODUCTS)
    assert data["total_items"] == sum(p["quantity"] for p in SAMPLE_PRODUCTS)
    assert data["categories"] == len({p["category"] for p in SAMPLE_PRODUCTS})
    assert data["total_value"] == pytest.approx(
        sum(p["quantity"] * p["price"] for p in SAMPLE_PRODUCTS), abs=0.01
    )


def test_stats_follow_mutations(client):
    """Test stats reflect creates, updates and deletes."""
    lamp_id = client.post(
        "/api/products",
        json={"name": "Desk Lamp", "category": "Office", "quantity": 10, "price": 15.50}
    ).json()["id"]
    client.post(
        "/api/products",
        json={"name": "Desk", "category": "Furniture", "quantity": 2, "price": 100}
    )
    client.put(
        f"/api/products/{lamp_id}",
        json={"name": "Desk Lamp", "category": "Furniture", "quantity": 4, "price": 15.50}
    )

    data = client.get("/api/stats").json()
    assert data == {
        "total_products": 2,
        "total_items": 6,
        "categories": 1,
        "total_value": 262.0
    }

    client.delete(f"/api/products/{lamp_id}")

    data = client.get("/api/stats").json()
    assert data["total_products"] == 1
    assert data["total_value"] == 200.0
