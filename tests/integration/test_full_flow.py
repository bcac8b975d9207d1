# -*- coding: utf-8 -*-

"""
Integration tests for complete end-to-end flow.
Checks interaction of the pipeline, the routes and the error handlers.
"""

import copy


class TestFullValidationFlow:
    """Integration tests for the dry-run validation flow."""

    def test_health_then_create_then_update(self, test_client, valid_package_payload):
        """
        What it does: Walks a package through health check, creation and update.
        Goal: Ensure all endpoints work together.
        """
        print("Step 1: Health check...")
        health_response = test_client.get("/health")
        assert health_response.status_code == 200
        assert health_response.json()["status"] == "healthy"

        print("Step 2: Validating package creation...")
        create_response = test_client.post("/v1/validate/packages", json=valid_package_payload)
        assert create_response.status_code == 200
        normalized = create_response.json()["data"]
        print(f"Normalized: {normalized}")

        print("Step 3: Re-validating the normalized payload is stable...")
        again = test_client.post("/v1/validate/packages", json=normalized)
        assert again.status_code == 200
        assert again.json()["data"] == normalized

        print("Step 4: Partial update with a single field...")
        update_response = test_client.patch(
            "/v1/validate/packages", json={"maxPeople": 8}
        )
        assert update_response.status_code == 200
        assert update_response.json()["data"] == {"maxPeople": 8}

    def test_booking_lifecycle(self, test_client, valid_booking_payload):
        """
        What it does: Creates, pays for and cancels a booking.
        Goal: Ensure booking rule sets chain naturally.
        """
        created = test_client.post("/v1/validate/bookings", json=valid_booking_payload)
        assert created.status_code == 200

        paid = test_client.post(
            "/v1/validate/bookings/payment",
            json={"amount": 420, "paymentMethod": "BANK_TRANSFER"},
        )
        assert paid.status_code == 200

        refused = test_client.patch(
            "/v1/validate/bookings/status", json={"status": "CANCELLED"}
        )
        assert refused.status_code == 400

        cancelled = test_client.patch(
            "/v1/validate/bookings/status",
            json={"status": "CANCELLED", "cancellationReason": " change of plans "},
        )
        assert cancelled.status_code == 200
        assert cancelled.json()["data"]["cancellationReason"] == "change of plans"


class TestRequestValidationFlow:
    """Integration tests for failure reporting."""

    def test_only_first_error_is_reported(self, test_client, valid_tour_payload):
        """
        What it does: A payload with several problems reports only the first.
        Goal: Short-circuit behavior is visible over HTTP.
        """
        broken = copy.deepcopy(valid_tour_payload)
        broken["name"] = ""
        broken["price"] = -1
        broken["agencyId"] = None

        response = test_client.post("/v1/validate/tours", json=broken)

        assert response.status_code == 400
        assert response.json()["message"] == "Valid package name is required"

    def test_reversed_dates_reported_regardless_of_other_fields(self, test_client):
        """
        What it does: A reversed range fails even when the rest of the body is empty.
        Goal: Date ordering is checked before the remaining package fields.
        """
        response = test_client.post(
            "/v1/validate/packages",
            json={"startDate": "2025-02-10", "endDate": "2025-02-01"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "End date must be after start date"

    def test_ticket_flow(self, test_client):
        """What it does: Ticket creation, status and assignment endpoints respond."""
        created = test_client.post(
            "/v1/validate/tickets",
            json={"title": "Lost voucher", "description": "Need a resend", "priority": "urgent"},
        )
        assert created.status_code == 200
        assert created.json()["data"]["priority"] == "URGENT"

        status = test_client.patch(
            "/v1/validate/tickets/status", json={"status": "RESOLVED", "comment": "sent"}
        )
        assert status.status_code == 200

        assignment = test_client.patch(
            "/v1/validate/tickets/assignment", json={"assignedToId": 12}
        )
        assert assignment.status_code == 400
