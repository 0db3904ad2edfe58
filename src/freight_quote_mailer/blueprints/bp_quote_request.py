"""Blueprint for the freight quote request renderer."""
import azure.functions as func

from freight_quote_mailer.handlers.quote_request import FreightQuoteRequestHandler

bp = func.Blueprint()


@bp.route('freightquote', methods=['GET', 'POST'], auth_level='anonymous')
def FreightQuoteRequest(req: func.HttpRequest) -> func.HttpResponse:
    """
    HTTP endpoint that renders a freight quote request email.

    Args:
        req (func.HttpRequest): The incoming HTTP request.

    Returns:
        func.HttpResponse: The HTTP response.
    """
    return FreightQuoteRequestHandler().handle(req)
