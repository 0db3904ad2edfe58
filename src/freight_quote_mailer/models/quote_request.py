"""Pydantic models describing the fields of the freight quote request template."""
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator


def _as_text(value: Any) -> Any:
    """Missing values render blank, flags as Yes/No and numbers as written."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


Text = Annotated[str, BeforeValidator(_as_text)]


class TemplateFields(BaseModel):
    """Base for every group of template fields. Unknown keys are ignored."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def field_paths(cls, prefix: str = "") -> list[str]:
        """
        List the dotted placeholder path of every leaf field.

        Args:
            prefix (str): path of the enclosing group, if any.

        Returns:
            list[str]: the leaf paths, keyed by alias where one is set.
        """
        paths: list[str] = []
        for name, field in cls.model_fields.items():
            key = f"{prefix}{field.alias or name}"
            annotation = field.annotation
            if isinstance(annotation, type) and issubclass(annotation, TemplateFields):
                paths.extend(annotation.field_paths(prefix=f"{key}."))
            else:
                paths.append(key)
        return paths


class LogisticsContact(TemplateFields):
    """Auction-side logistics contact the quote request is addressed to."""
    email: Text = ""


class AuctionInfo(TemplateFields):
    """Auction details: where and when the lot is picked up and dropped off."""
    auction_name: Text = ""
    pickup_datetime: Text = ""
    pickup_address: Text = ""
    delivery_datetime: Text = ""
    delivery_notice: Text = ""
    special_notes: Text = ""
    logistics_contact: LogisticsContact = Field(default_factory=LogisticsContact)

    @field_validator("logistics_contact", mode="before")
    @classmethod
    def null_contact_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class ShippingRequirements(TemplateFields):
    labor_needed: Text = ""
    truck_types: Text = ""
    total_pallets: Text = ""
    weight_notes: Text = ""


class RequestMeta(TemplateFields):
    """Who is asking for the quote."""
    requester_name: Text = ""
    requester_phone: Text = ""


class FreightQuoteContext(TemplateFields):
    """All values substituted into the freight quote request template."""
    email_subject: Text = ""
    delivery_address: Text = ""
    auction_info: AuctionInfo = Field(default_factory=AuctionInfo)
    shipping_requirements: ShippingRequirements = Field(default_factory=ShippingRequirements)
    meta: RequestMeta = Field(default_factory=RequestMeta, alias="_meta")

    @field_validator("auction_info", "shipping_requirements", "meta", mode="before")
    @classmethod
    def null_group_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def recipient(self) -> str:
        return self.auction_info.logistics_contact.email.strip()

    def template_context(self) -> dict[str, Any]:
        """Returns the nested mapping handed to the template engine."""
        return self.model_dump(by_alias=True)
