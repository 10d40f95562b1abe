# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for bug report endpoints."""

MISSING_ID = "00000000-0000-0000-0000-000000000000"


class TestBugReports:
    def test_user_submits_admin_reviews(self, login, basic_user, admin_user):
        client = login(basic_user)
        response = client.post("/api/v1/bug-reports", json={"message": "Page is blank"})
        assert response.status_code == 201
        report = response.json()
        assert report["submitted_by_name"] == "Basic Tester"

        assert client.get("/api/v1/bug-reports").status_code == 403
        assert client.get("/api/v1/bug-reports/count").status_code == 403

        client = login(admin_user)
        assert client.get("/api/v1/bug-reports/count").json() == {"count": 1}
        reports = client.get("/api/v1/bug-reports").json()
        assert [r["id"] for r in reports] == [report["id"]]

        assert client.delete(f"/api/v1/bug-reports/{report['id']}").status_code == 204
        assert client.get("/api/v1/bug-reports/count").json() == {"count": 0}

    def test_blank_message_rejected(self, login, basic_user):
        client = login(basic_user)
        response = client.post("/api/v1/bug-reports", json={"message": "  "})
        assert response.status_code == 422

    def test_delete_unknown_report(self, admin_client):
        assert admin_client.delete(f"/api/v1/bug-reports/{MISSING_ID}").status_code == 404

    def test_delete_denied_before_lookup(self, login, technician_user):
        client = login(technician_user)
        response = client.delete(f"/api/v1/bug-reports/{MISSING_ID}")
        assert response.status_code == 403
        assert response.json()["code"] == "permission_denied"

    def test_unauthenticated(self, client):
        assert client.post("/api/v1/bug-reports", json={"message": "x"}).status_code == 401
