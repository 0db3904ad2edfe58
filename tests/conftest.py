"""Shared pytest fixtures for the freight quote mailer tests."""
import pytest

from freight_quote_mailer.models.quote_request import FreightQuoteContext
from freight_quote_mailer.services.template_service import TemplateService


@pytest.fixture
def full_payload():
    """Every template field filled with a distinct, non-empty value."""
    return {
        "email_subject": "Freight quote request: Lot 42, Dallas to Tulsa",
        "delivery_address": "88 Warehouse Row, Tulsa, OK 74103",
        "auction_info": {
            "auction_name": "Spring Industrial Liquidation",
            "pickup_datetime": "Mon 3/9, 9am-3pm",
            "pickup_address": "1200 Commerce St, Dallas, TX 75202",
            "delivery_datetime": "Wed 3/11, 8am-noon",
            "delivery_notice": "Call 24 hours ahead",
            "special_notes": "Forklift on site at pickup only",
            "logistics_contact": {"email": "logistics@auctionhouse.example"},
        },
        "shipping_requirements": {
            "labor_needed": "Liftgate and two loaders",
            "truck_types": "26ft box truck",
            "total_pallets": 12,
            "weight_notes": "About 9,000 lbs total",
        },
        "_meta": {
            "requester_name": "Dana Whitfield",
            "requester_phone": "555-0142",
        },
    }


@pytest.fixture
def full_context(full_payload):
    return FreightQuoteContext.model_validate(full_payload)


@pytest.fixture
def template_service():
    return TemplateService()
