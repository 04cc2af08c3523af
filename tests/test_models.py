# =============================================================================
# tests/test_models.py - View Model and Form Payload Tests
# =============================================================================
# Unit tests for the row -> view model mapping and the form payloads:
# - NULL columns fall back to field defaults
# - renamed columns land on the right field
# - views serialize with camelCase keys
# - forms accept what the console posts and write the right columns
# - every row keeps its own id through the mapping
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    EventForm,
    EventView,
    ExhibitorForm,
    ExhibitorView,
    ImageUpload,
    Role,
    SocietyView,
    UserCreateForm,
    UserUpdateForm,
    UserView,
    VendorForm,
    VendorView,
    VenueForm,
    VenueView,
)


# =============================================================================
# Users
# =============================================================================

class TestUserView:
    """Tests for UserView.from_row."""

    def test_nulls_become_defaults(self):
        """A super admin row with NULL city and phone maps to empty strings."""
        user = UserView.from_row({
            "id": "u1", "email": "a@b.co", "name": "A", "role": "super_admin",
            "city": None, "phone": None, "emergency_contact": None,
        })

        assert user.city == ""
        assert user.phone == ""
        assert user.emergency_contact.name == ""
        assert user.is_super_admin

    def test_serializes_camel_case(self):
        """to_view() uses the console's camelCase keys."""
        view = UserView(id="u1", role=Role.ADMIN, first_name="Asha").to_view()

        assert view["firstName"] == "Asha"
        assert view["lastLogin"] == ""
        assert "first_name" not in view

    def test_unknown_role_rejected(self):
        """Role is a closed set."""
        with pytest.raises(ValidationError):
            UserView.from_row({"id": "u1", "role": "janitor"})

    def test_role_label(self):
        assert Role.SALES_MARKETING.label == "sales marketing"


class TestUserForms:
    """Tests for the add/edit user payloads."""

    def test_blank_role_is_none(self):
        """The role select posts "" until something is picked."""
        form = UserCreateForm.model_validate({"role": ""})
        assert form.role is None

    def test_super_admin_city_stored_as_null(self):
        form = UserCreateForm(name="Root", email="r@b.co", role=Role.SUPER_ADMIN, city="Pune")
        assert form.to_row("u1")["city"] is None

    def test_city_admin_city_kept(self):
        form = UserCreateForm(name="Pune", email="p@b.co", role=Role.ADMIN, city="Pune")
        row = form.to_row("u1")
        assert row == {
            "id": "u1", "email": "p@b.co", "name": "Pune", "role": "admin",
            "city": "Pune", "phone": "", "status": "active",
        }

    def test_password_not_in_row_or_repr(self):
        form = UserCreateForm(name="A", password="Secret123", confirm_password="Secret123")
        assert "password" not in form.to_row("u1")
        assert "Secret123" not in repr(form)

    def test_update_blank_optionals_are_null(self):
        row = UserUpdateForm(name="A", role=Role.ADMIN, city="Pune").to_row()
        assert row["first_name"] is None
        assert row["department"] is None


# =============================================================================
# Events
# =============================================================================

class TestEventView:
    """Tests for EventView.from_row."""

    def test_renamed_columns(self):
        event = EventView.from_row({
            "id": "e1", "event_date": "2030-01-01", "event_time": "10:00",
            "venue_name": "Phoenix Hall", "vendor_ids": ["v1"],
        })

        assert event.date == "2030-01-01"
        assert event.time == "10:00"
        assert event.venue == "Phoenix Hall"
        assert event.vendors == ["v1"]

    def test_embedded_venue_fallback(self):
        """Without a venue_name column the embedded relation's name is used."""
        event = EventView.from_row({"id": "e1", "venue_name": None, "venue": {"name": "Sea Breeze"}})
        assert event.venue == "Sea Breeze"

    def test_venue_name_column_wins(self):
        event = EventView.from_row({"id": "e1", "venue_name": "Copied", "venue": {"name": "Current"}})
        assert event.venue == "Copied"

    def test_missing_embedded_venue(self):
        event = EventView.from_row({"id": "e1", "venue": None})
        assert event.venue == ""

    def test_is_active(self):
        assert EventView(id="e1", status="ongoing").is_active
        assert not EventView(id="e1", status="draft").is_active


class TestEventForm:
    """Tests for EventForm payload parsing."""

    def test_accepts_camel_case(self):
        form = EventForm.model_validate({"eventDate": "2030-01-01", "venueId": "v1", "maxCapacity": 250})
        assert form.event_date == "2030-01-01"
        assert form.venue_id == "v1"
        assert form.max_capacity == 250

    def test_defaults(self):
        form = EventForm()
        assert form.max_capacity == 100
        assert form.plan_type == "Plan A"
        assert form.status == "draft"

    def test_blank_image_url_written_as_null(self):
        assert EventForm().to_row()["event_image_url"] is None

    def test_image_extension(self):
        assert ImageUpload(filename="poster.final.PNG").extension == "PNG"
        assert ImageUpload(filename="poster").extension == "bin"
        assert ImageUpload(filename="a.jpg", content=b"1234").size == 4


# =============================================================================
# Venues, Vendors, Exhibitors, Societies
# =============================================================================

class TestVenueModels:

    def test_capacity_column_is_member_count(self):
        venue = VenueView.from_row({"id": "v1", "capacity": 300})
        assert venue.member_count == 300
        assert venue.to_view()["memberCount"] == 300

    def test_form_writes_capacity_column(self):
        row = VenueForm(name="Hall", member_count=120).to_row()
        assert row["capacity"] == 120
        assert "member_count" not in row


class TestVendorModels:

    def test_null_rating_is_zero(self):
        assert VendorView.from_row({"id": "v1", "rating": None}).rating == 0

    def test_category_label(self):
        view = VendorView(id="v1", category="sound_lights").to_view()
        assert view["categoryLabel"] == "sound lights"

    def test_blank_price_range_written_as_null(self):
        row = VendorForm(name="Acme", rating=4.5).to_row()
        assert row["price_range"] is None
        assert row["rating"] == 4.5
        assert row["category"] == "sound_lights"


class TestExhibitorForm:

    def test_blank_optionals_written_as_null(self):
        row = ExhibitorForm(company_name="Acme").to_row()
        assert row["gst_number"] is None
        assert row["website"] is None
        assert row["company_name"] == "Acme"
        assert row["country"] == "India"
        assert row["social_media_links"] == {
            "facebook": "", "twitter": "", "linkedin": "", "instagram": "",
        }


class TestSocietyView:

    def test_defaults(self):
        society = SocietyView.from_row({"id": "s1", "name": "Green Valley", "facilities": None})
        assert society.facilities == []
        assert society.status == "active"


# =============================================================================
# Row Identity
# =============================================================================

class TestIdMapping:
    """Distinct rows map to distinct views carrying the row's own id."""

    ROWS = {
        UserView: [
            {"id": "u1", "role": "admin", "city": "Pune"},
            {"id": "u2", "role": "admin", "city": "Pune"},
            {"id": "u3", "role": "super_admin", "city": None},
        ],
        EventView: [
            {"id": "e1", "venue": {"name": "Phoenix Hall"}},
            {"id": "e2", "venue": {"name": "Phoenix Hall"}},
            {"id": "e3", "venue_name": "Sea Breeze", "venue": None},
        ],
        VenueView: [{"id": "v1", "capacity": 10}, {"id": "v2", "capacity": 10}],
        VendorView: [{"id": "d1", "rating": None}, {"id": "d2", "rating": None}],
        ExhibitorView: [{"id": "x1"}, {"id": "x2"}],
        SocietyView: [{"id": "s1", "facilities": None}, {"id": "s2", "facilities": None}],
    }

    @pytest.mark.parametrize("view", list(ROWS), ids=lambda view: view.__name__)
    def test_ids_preserved_and_unique(self, view):
        rows = self.ROWS[view]

        ids = [view.from_row(row).id for row in rows]

        assert ids == [row["id"] for row in rows]
        assert len(set(ids)) == len(rows)

    def test_embedded_venue_left_in_source_row(self):
        row = {"id": "e1", "venue": {"name": "Phoenix Hall"}}

        EventView.from_row(row)

        assert row == {"id": "e1", "venue": {"name": "Phoenix Hall"}}
