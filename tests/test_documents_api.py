import pytest

TRANSACTION = {"documentType": "Tờ khai thuế GTGT", "transactionType": "giao", "handledBy": "Chị Lan"}


@pytest.fixture
def business_id(client):
    r = client.post("/api/businesses", json={"name": "Hoàng Long", "taxId": "0312345678"})
    return r.json()["id"]


def test_create_and_list(client, business_id):
    r = client.post(f"/api/businesses/{business_id}/documents", json={**TRANSACTION, "transactionDate": ""})

    assert r.status_code == 201
    created = r.json()
    assert created["businessId"] == business_id
    assert created["transactionType"] == "giao"
    assert created["transactionDate"]

    listed = client.get(f"/api/businesses/{business_id}/documents").json()
    assert [t["id"] for t in listed] == [created["id"]]


def test_list_orders_by_transaction_date(client, business_id):
    for date in ("2024-01-05T08:00:00", "2024-06-01T08:00:00", "2024-03-10T08:00:00"):
        client.post(f"/api/businesses/{business_id}/documents", json={**TRANSACTION, "transactionDate": date})

    listed = client.get(f"/api/businesses/{business_id}/documents").json()

    assert [t["transactionDate"][:10] for t in listed] == ["2024-06-01", "2024-03-10", "2024-01-05"]


def test_invalid_transaction_type(client, business_id):
    r = client.post(f"/api/businesses/{business_id}/documents", json={**TRANSACTION, "transactionType": "mượn"})
    assert r.status_code == 400


def test_create_for_unknown_business(client):
    r = client.post("/api/businesses/999/documents", json=TRANSACTION)
    assert r.status_code == 404


def test_list_for_business_without_documents(client, business_id):
    assert client.get(f"/api/businesses/{business_id}/documents").json() == []


def test_delete_requires_admin_session(client, business_id, admin_headers):
    created = client.post(f"/api/businesses/{business_id}/documents", json=TRANSACTION).json()
    url = f"/api/documents/{created['id']}"

    anonymous = client.delete(url)
    assert anonymous.status_code == 401
    assert anonymous.json()["message"] == "Cần quyền admin để xóa"

    bogus = client.delete(url, headers={"Authorization": "Bearer not-a-token"})
    assert bogus.status_code == 401

    ok = client.delete(url, headers=admin_headers)
    assert ok.status_code == 200

    again = client.delete(url, headers=admin_headers)
    assert again.status_code == 404


def test_deleting_business_removes_its_documents(client, business_id):
    client.post(f"/api/businesses/{business_id}/documents", json=TRANSACTION)

    client.request("DELETE", f"/api/businesses/{business_id}", json={"password": "0102"})

    assert client.get(f"/api/businesses/{business_id}/documents").json() == []
