# =============================================================================
# core/models/exhibitor.py - Exhibitor View Models
# =============================================================================
# Exhibitors are companies that take booths at events. The category and
# sub-category lists below are the ones offered by the registration form;
# a sub-category is only valid under its own category.
# =============================================================================

from typing import Any, Literal

from pydantic import Field

from .base import FormModel, ViewModel


ExhibitorStatus = Literal["registered", "confirmed", "checked_in", "cancelled", "pending_approval"]
PaymentStatus = Literal["pending", "paid", "refunded", "partial"]


# -----------------------------------------------------------------------------
# Reference Lists
# -----------------------------------------------------------------------------

EXHIBITOR_SUB_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Technology": ("Software", "Hardware", "AI/ML", "IoT", "Cybersecurity", "Mobile Apps", "Web Development"),
    "Healthcare": ("Medical Devices", "Pharmaceuticals", "Telemedicine", "Health Tech", "Wellness"),
    "Education": ("EdTech", "Online Learning", "Training", "Certification", "Academic Services"),
    "Fashion": ("Clothing", "Accessories", "Footwear", "Jewelry", "Beauty Products"),
    "Food & Beverage": ("Restaurants", "Catering", "Packaged Foods", "Beverages", "Organic Products"),
    "Automotive": ("Cars", "Motorcycles", "Parts & Accessories", "Services", "Electric Vehicles"),
    "Home & Garden": ("Furniture", "Decor", "Appliances", "Gardening", "Home Improvement"),
    "Sports & Fitness": ("Equipment", "Apparel", "Fitness Centers", "Sports Services", "Nutrition"),
    "Travel & Tourism": ("Hotels", "Travel Agencies", "Tour Operators", "Transportation", "Destinations"),
    "Finance & Banking": ("Banks", "Insurance", "Investment", "Fintech", "Loans & Credit"),
    "Real Estate": ("Residential", "Commercial", "Property Management", "Construction", "Architecture"),
    "Entertainment": ("Events", "Media", "Gaming", "Music", "Film & Video"),
    "Manufacturing": ("Industrial Equipment", "Raw Materials", "Machinery", "Tools", "Automation"),
    "Retail": ("E-commerce", "Physical Stores", "Wholesale", "Distribution", "Franchising"),
    "Services": ("Consulting", "Marketing", "Legal", "Accounting", "IT Services"),
    "Others": ("Miscellaneous", "Emerging Industries", "Non-profit", "Government", "Research"),
}

EXHIBITOR_CATEGORIES: tuple[str, ...] = tuple(EXHIBITOR_SUB_CATEGORIES)

BUSINESS_TYPES: tuple[str, ...] = (
    "Private Limited", "Public Limited", "Partnership", "Sole Proprietorship",
    "LLP", "NGO", "Government",
)

COMPANY_SIZES: tuple[str, ...] = (
    "1-10 employees", "11-50 employees", "51-200 employees",
    "201-500 employees", "500+ employees",
)

BOOTH_SIZES: tuple[str, ...] = (
    "3x3 meters", "3x6 meters", "6x6 meters", "6x9 meters", "9x9 meters", "Custom Size",
)


class SocialLinks(ViewModel):
    linkedin: str = ""
    facebook: str = ""
    twitter: str = ""
    instagram: str = ""


class ExhibitorView(ViewModel):
    """A row of the exhibitors table as the console sees it."""

    id: str

    # Company
    company_name: str = ""
    company_description: str = ""
    established_year: str = ""
    company_size: str = ""
    website: str = ""

    # Contact
    contact_person: str = ""
    designation: str = ""
    email: str = ""
    phone: str = ""
    alternate_phone: str = ""
    alternate_email: str = ""

    # Business
    category: str = ""
    sub_category: str = ""
    business_type: str = ""
    gst_number: str = ""
    pan_number: str = ""

    # Address
    address: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""
    country: str = ""

    # Exhibition
    booth_preference: str = ""
    booth_size: str = ""
    special_requirements: str = ""
    previous_exhibitions: str = ""
    expected_visitors: str = ""

    products: list[str] = []
    services: list[str] = []
    target_audience: str = ""

    # Billing
    registration_fee: float = 0
    payment_method: str = ""
    billing_address: str = ""

    social_media_links: SocialLinks = Field(default_factory=SocialLinks)

    status: ExhibitorStatus = "registered"
    payment_status: PaymentStatus = "pending"
    send_confirmation_email: bool = False
    allow_marketing_emails: bool = False

    booth: str = ""
    registration_date: str = ""

    created_at: str = ""
    updated_at: str = ""


# =============================================================================
# Form Payloads
# =============================================================================

class SocialLinksForm(FormModel):
    linkedin: str = ""
    facebook: str = ""
    twitter: str = ""
    instagram: str = ""


class ExhibitorForm(FormModel):
    """
    Payload of the add/edit exhibitor form.

    Uploaded documents (company profile, GST certificate, ...) are not part of
    the payload; only the text fields are stored.
    """

    company_name: str = ""
    company_description: str = ""
    established_year: str = ""
    company_size: str = ""
    website: str = ""

    contact_person: str = ""
    designation: str = ""
    email: str = ""
    phone: str = ""
    alternate_phone: str = ""
    alternate_email: str = ""

    category: str = ""
    sub_category: str = ""
    business_type: str = ""
    gst_number: str = ""
    pan_number: str = ""

    address: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""
    country: str = "India"

    booth_preference: str = ""
    booth_size: str = ""
    special_requirements: str = ""
    previous_exhibitions: str = ""
    expected_visitors: str = ""

    products: list[str] = []
    services: list[str] = []
    target_audience: str = ""

    registration_fee: float = 0
    payment_method: str = ""
    billing_address: str = ""

    social_media_links: SocialLinksForm = Field(default_factory=SocialLinksForm)

    status: ExhibitorStatus = "registered"
    payment_status: PaymentStatus = "pending"
    send_confirmation_email: bool = True
    allow_marketing_emails: bool = False

    def to_row(self) -> dict[str, Any]:
        row = self.model_dump(exclude={"social_media_links"})
        row["social_media_links"] = self.social_media_links.model_dump()
        # Optional text columns are stored as NULL when left blank
        for column in (
            "established_year", "company_size", "website", "alternate_phone",
            "alternate_email", "sub_category", "gst_number", "pan_number",
            "booth_preference", "special_requirements", "previous_exhibitions",
            "target_audience", "payment_method", "billing_address",
        ):
            row[column] = row[column] or None
        return row
