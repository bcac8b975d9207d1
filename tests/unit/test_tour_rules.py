# -*- coding: utf-8 -*-

"""
Unit tests for tour listing rule sets (tour.create, tour.update).
"""

import pytest

from tourdesk.rules import TOUR_CREATE, TOUR_UPDATE, validate


class TestTourCreate:
    """Tests for the tour.create rule set."""

    def test_valid_payload_is_normalized(self, valid_tour_payload):
        """
        What it does: Accepts a full tour and normalizes strings and lists.
        Purpose: Inclusions, exclusions and itinerary descriptions are trimmed.
        """
        result = validate(valid_tour_payload, TOUR_CREATE)

        assert result.ok is True
        payload = result.payload
        assert payload["name"] == "Himalayan Trek"
        assert payload["description"] == "Ten days in the mountains"
        assert payload["destination"] == "Manali"
        assert payload["inclusions"] == ["guide", "tents"]
        assert payload["exclusions"] == ["flights"]
        assert [item["description"] for item in payload["itinerary"]] == [
            "Meet the group",
            "Hike to base camp",
        ]
        assert payload["itinerary"][0]["title"] == "Arrival"
        assert payload["agencyId"] == "agency-42"

    def test_empty_lists_allowed(self, valid_tour_payload):
        """What it does: Tours may list no inclusions, exclusions, itinerary or images."""
        for field in ("inclusions", "exclusions", "itinerary", "images"):
            valid_tour_payload[field] = []

        assert validate(valid_tour_payload, TOUR_CREATE).ok is True

    @pytest.mark.parametrize("field", ["startDate", "endDate"])
    def test_missing_date_uses_combined_message(self, valid_tour_payload, field):
        """What it does: Either missing date reports the combined dates message."""
        del valid_tour_payload[field]
        result = validate(valid_tour_payload, TOUR_CREATE)
        assert result.error.message == "Valid start and end dates are required"

    def test_reversed_dates_fail(self, valid_tour_payload):
        """What it does: End must come after start."""
        valid_tour_payload["endDate"] = "2025-04-30T00:00:00Z"
        result = validate(valid_tour_payload, TOUR_CREATE)
        assert result.error.message == "End date must be after start date"

    @pytest.mark.parametrize(
        "field, message",
        [
            ("name", "Valid package name is required"),
            ("price", "Valid price is required"),
            ("duration", "Valid duration in days is required"),
            ("maxPeople", "Valid maximum number of people is required"),
            ("inclusions", "Inclusions must be an array"),
            ("exclusions", "Exclusions must be an array"),
            ("itinerary", "Itinerary must be an array"),
            ("images", "Images must be an array"),
            ("agencyId", "Valid agency ID is required"),
        ],
    )
    def test_missing_field_fails(self, valid_tour_payload, field, message):
        """What it does: Each missing field yields its own message."""
        del valid_tour_payload[field]
        result = validate(valid_tour_payload, TOUR_CREATE)
        assert result.error.status == 400
        assert result.error.message == message

    def test_itinerary_entry_without_description_fails(self, valid_tour_payload):
        """What it does: Itinerary entries need a string description."""
        valid_tour_payload["itinerary"].append({"day": 3, "title": "Summit"})
        result = validate(valid_tour_payload, TOUR_CREATE)
        assert result.error.message == "Each itinerary item must have a description"


class TestTourUpdate:
    """Tests for the tour.update rule set."""

    def test_empty_payload_is_valid(self):
        """What it does: No fields means nothing to check."""
        assert validate({}, TOUR_UPDATE).ok is True

    @pytest.mark.parametrize(
        "payload, message",
        [
            ({"name": ""}, "Package name must be a non-empty string"),
            ({"description": 3}, "Package description must be a non-empty string"),
            ({"price": -5}, "Price must be a positive number"),
            ({"duration": 0}, "Duration must be a positive number"),
            ({"destination": " "}, "Destination must be a non-empty string"),
            ({"maxPeople": "ten"}, "Maximum number of people must be a positive number"),
            ({"startDate": "soon"}, "Invalid start date"),
            ({"endDate": "later"}, "Invalid end date"),
            ({"images": "a.jpg"}, "Images must be an array"),
        ],
    )
    def test_update_specific_messages(self, payload, message):
        """What it does: Update failures use the update wording."""
        result = validate(payload, TOUR_UPDATE)
        assert result.error.status == 400
        assert result.error.message == message

    def test_dates_compared_only_when_both_present(self):
        """What it does: A lone date is fine, a reversed pair is not."""
        assert validate({"startDate": "2030-01-01"}, TOUR_UPDATE).ok is True
        result = validate(
            {"startDate": "2030-01-02", "endDate": "2030-01-01"}, TOUR_UPDATE
        )
        assert result.error.message == "End date must be after start date"

    def test_partial_update_normalizes_present_fields(self):
        """What it does: Only the sent fields appear, normalized."""
        result = validate(
            {"name": " New name ", "itinerary": [{"description": " day one "}]},
            TOUR_UPDATE,
        )
        assert result.payload == {
            "name": "New name",
            "itinerary": [{"description": "day one"}],
        }
