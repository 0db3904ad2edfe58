"""Service functions for freight quote requests"""
import datetime
import re
import uuid

from ..models.quote_request import FreightQuoteContext

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


# noinspection PyMethodMayBeStatic
class RequestService:
    """Service functions for freight quote requests"""
    def auction_slug(self, context: FreightQuoteContext) -> str:
        """Lower-cased auction name with separators collapsed to '-', or 'unnamed'."""
        slug = _SLUG_SEPARATORS.sub("-", context.auction_info.auction_name.lower()).strip("-")
        return slug or "unnamed"

    def generate_request_id(self, context: FreightQuoteContext) -> str:
        """
        Generate a unique request ID.

        Returns:
            str: The generated request ID.
        """
        timestamp = datetime.datetime.now(datetime.timezone.utc).strftime("%Y%m%d%H%M%S")
        unique_id = uuid.uuid4().hex[:8]
        request_id = f"quote_{self.auction_slug(context)}_{timestamp}_{unique_id}"

        return request_id
