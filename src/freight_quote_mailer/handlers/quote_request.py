"""Handler for freight quote request render requests."""
import json
import logging

import azure.functions as func
from pydantic import ValidationError

from ..models.email import EmailMessage
from ..models.quote_request import FreightQuoteContext
from ..services.placeholder_service import residual_placeholders
from ..services.request_service import RequestService
from ..services.template_service import TemplateService

USAGE = (
    "POST the freight quote fields as a JSON object to render the request email. "
    "Add ?format=markdown to receive the Markdown body only."
)


class FreightQuoteRequestHandler:
    """Turns an HTTP request carrying template fields into a rendered freight quote email."""

    def __init__(self, template_service: TemplateService | None = None, request_service: RequestService | None = None):
        self.template_service = template_service or TemplateService()
        self.request_service = request_service or RequestService()

    def handle(self, req: func.HttpRequest) -> func.HttpResponse:
        """
        Render the freight quote request described by the request body.

        Args:
            req (func.HttpRequest): The incoming HTTP request.

        Returns:
            func.HttpResponse: The HTTP response.
        """
        if req.method != 'POST':
            return func.HttpResponse(USAGE, status_code=200)

        # ----- Parse Context ----- #
        try:
            payload = req.get_json()
        except ValueError:  # Catches req.get_json() errors
            logging.error("Error processing JSON request: Invalid JSON format.")
            return func.HttpResponse("Invalid JSON format", status_code=400)

        if not isinstance(payload, dict):
            logging.error("Freight quote payload is not a JSON object.")
            return func.HttpResponse("Invalid payload: expected a JSON object.", status_code=400)

        try:
            context: FreightQuoteContext = FreightQuoteContext.model_validate(payload)
        except ValidationError as val_err:
            logging.warning(f"Freight quote payload failed validation: {val_err.error_count()} error(s).")
            return func.HttpResponse(
                val_err.json(include_url=False),
                mimetype="application/json",
                status_code=422
            )

        # ----- Render ----- #
        request_id: str = self.request_service.generate_request_id(context)
        logging.info(f"Request {request_id}: Rendering freight quote request.")

        markdown: str | None = self.template_service.render_quote_request(context, request_id)
        if markdown is None:
            logging.error(f"Request {request_id}: Failed to render email. Aborting.")
            return func.HttpResponse("Error rendering freight quote request", status_code=500)

        leftover: list[str] = residual_placeholders(markdown)
        email_message: EmailMessage = self.template_service.build_email(context, markdown, leftover, request_id)

        if req.params.get("format") == "markdown":
            return func.HttpResponse(
                email_message.markdown,
                mimetype="text/markdown",
                status_code=200
            )

        body = {
            "request_id": request_id,
            "message": email_message.model_dump(),
            "residual_placeholders": leftover,
        }
        return func.HttpResponse(json.dumps(body), mimetype="application/json", status_code=200)
