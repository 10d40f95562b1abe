# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for department, technician and ticket endpoints."""

import pytest

TICKET = {
    "ticket_number": "T-100",
    "title": "Fix heating",
    "start_date": "2026-05-01T08:00:00",
    "end_date": "2026-05-01T12:00:00",
}


@pytest.fixture
def crew(admin_client):
    """A department with one technician matching the technician user's email."""
    department = admin_client.post("/api/v1/departments", json={"name": "Heating"}).json()
    own = admin_client.post(
        "/api/v1/technicians",
        json={
            "first_name": "Tech",
            "last_name": "Tester",
            "email": "tech@example.com",
            "department_id": department["id"],
        },
    ).json()
    other = admin_client.post(
        "/api/v1/technicians",
        json={"first_name": "Other", "last_name": "Person", "email": "other@example.com"},
    ).json()
    return department, own, other


class TestDepartments:
    def test_technician_cannot_create_department(self, login, technician_user):
        client = login(technician_user)
        response = client.post("/api/v1/departments", json={"name": "Heating"})
        assert response.status_code == 403

    def test_crud(self, admin_client):
        created = admin_client.post("/api/v1/departments", json={"name": "Heating"})
        assert created.status_code == 201
        department_id = created.json()["id"]

        updated = admin_client.put(
            f"/api/v1/departments/{department_id}", json={"color": "#ff0000"}
        )
        assert updated.json()["color"] == "#ff0000"

        assert admin_client.delete(f"/api/v1/departments/{department_id}").status_code == 204
        assert admin_client.get(f"/api/v1/departments/{department_id}").status_code == 404

    def test_filter_technicians_by_department(self, admin_client, crew):
        department, own, _ = crew
        response = admin_client.get(
            "/api/v1/technicians", params={"department_id": department["id"]}
        )
        assert [t["id"] for t in response.json()] == [own["id"]]


class TestTickets:
    def test_user_cannot_view_tickets(self, login, basic_user):
        client = login(basic_user)
        response = client.get("/api/v1/tickets")
        assert response.status_code == 403

    def test_owner_edits_own_ticket(self, admin_client, crew, login, technician_user):
        _, own, _ = crew
        ticket = admin_client.post(
            "/api/v1/tickets", json={**TICKET, "assignee_ids": [own["id"]]}
        ).json()
        assert [a["id"] for a in ticket["assignees"]] == [own["id"]]

        client = login(technician_user)
        response = client.put(f"/api/v1/tickets/{ticket['id']}", json={"title": "Heating fixed"})
        assert response.status_code == 200
        assert response.json()["title"] == "Heating fixed"

    def test_non_owner_cannot_edit(self, admin_client, crew, login, technician_user):
        _, _, other = crew
        ticket = admin_client.post(
            "/api/v1/tickets", json={**TICKET, "assignee_ids": [other["id"]]}
        ).json()

        client = login(technician_user)
        response = client.put(f"/api/v1/tickets/{ticket['id']}", json={"title": "Mine now"})
        assert response.status_code == 403

    def test_technician_cannot_delete(self, admin_client, login, technician_user):
        ticket = admin_client.post("/api/v1/tickets", json=TICKET).json()
        client = login(technician_user)
        assert client.delete(f"/api/v1/tickets/{ticket['id']}").status_code == 403

    def test_inverted_dates_rejected(self, admin_client):
        response = admin_client.post(
            "/api/v1/tickets", json={**TICKET, "end_date": "2026-04-01T08:00:00"}
        )
        assert response.status_code == 422

    def test_duplicate_ticket_number(self, admin_client):
        admin_client.post("/api/v1/tickets", json=TICKET)
        response = admin_client.post("/api/v1/tickets", json=TICKET)
        assert response.status_code == 400
