"""Service for rendering freight quote request emails with Jinja2."""
import logging
import pathlib

from jinja2 import Template, TemplateNotFound, Environment, FileSystemLoader, select_autoescape

from ..config import TEMPLATE_DIR, TEMPLATE_FILE_NAME, DEFAULT_CC
from ..models.email import EmailMessage
from ..models.quote_request import FreightQuoteContext
from .placeholder_service import find_placeholders, residual_placeholders


# noinspection PyMethodMayBeStatic
class TemplateService:
    """Service for rendering the freight quote request template and composing the email."""

    def __init__(self, template_dir: pathlib.Path | str | None = None):
        self.jinja_env: Environment | None = None
        template_dir = pathlib.Path(template_dir or TEMPLATE_DIR)
        try:
            if not template_dir.is_dir():
                logging.error(f"Jinja template directory not found at: {template_dir}")
                raise FileNotFoundError(f"Jinja template directory not found: {template_dir}")

            # Markdown templates are not autoescaped
            self.jinja_env = Environment(
                loader=FileSystemLoader(template_dir),
                autoescape=select_autoescape(['html', 'xml'])
            )
            logging.info(f"Jinja2 environment loaded successfully from: {template_dir}")
        except FileNotFoundError as e:
            logging.exception(f"Failed to initialize Jinja2 environment: {e}")

    def render_quote_request(
            self, context: FreightQuoteContext, request_id: str, template_name: str = TEMPLATE_FILE_NAME
    ) -> str | None:
        """
        Render the freight quote request template.

        Args:
            context (FreightQuoteContext): the values to substitute.
            request_id (str): The request ID for logging purposes.
            template_name (str): The name of the template file.

        Returns:
             The rendered Markdown document, or None on failure.
        """
        if not self.jinja_env:
            logging.error(f"Request {request_id}: Cannot render email, Jinja2 environment not available.")
            return None
        try:
            template: Template = self.jinja_env.get_template(template_name)
            rendered: str = template.render(context.template_context())
            logging.debug(f"Request {request_id}: Email template rendered successfully.")
            return rendered
        except TemplateNotFound as template_err:
            logging.error(f"Request {request_id}: Template not found: {template_err}", exc_info=True)
            return None
        except Exception as render_err:
            logging.error(f"Request {request_id}: Error rendering template: {render_err}", exc_info=True)
            return None

    def template_placeholders(self, template_name: str = TEMPLATE_FILE_NAME) -> list[str]:
        """
        List the placeholder paths a template expects.

        Args:
            template_name (str): The name of the template file.

        Returns:
            list[str]: dotted paths in order of first appearance.

        Raises:
            RuntimeError: If the Jinja2 environment is not available.
            jinja2.TemplateNotFound: If the template does not exist.
        """
        if not self.jinja_env:
            raise RuntimeError("Jinja2 environment not available.")
        source, _, _ = self.jinja_env.loader.get_source(self.jinja_env, template_name)
        return find_placeholders(source)

    def compose_email(
            self, context: FreightQuoteContext, request_id: str, template_name: str = TEMPLATE_FILE_NAME
    ) -> EmailMessage | None:
        """
        Render the template and wrap it in an email addressed to the logistics contact.

        Args:
            context (FreightQuoteContext): the values to substitute.
            request_id (str): The request ID for logging purposes.
            template_name (str): The name of the template file.

        Returns:
            The composed email, or None if rendering failed.
        """
        markdown = self.render_quote_request(context, request_id, template_name=template_name)
        if markdown is None:
            return None
        return self.build_email(context, markdown, residual_placeholders(markdown), request_id)

    def build_email(
            self, context: FreightQuoteContext, markdown: str, leftover: list[str], request_id: str
    ) -> EmailMessage:
        """
        Wrap an already rendered document in an email addressed to the logistics contact.

        Args:
            context (FreightQuoteContext): the values the document was rendered from.
            markdown (str): the rendered document.
            leftover (list[str]): placeholders still present in the document.
            request_id (str): The request ID for logging purposes.

        Returns:
            The composed email.
        """
        if leftover:
            logging.warning(f"Request {request_id}: Rendered email still contains placeholders: {leftover}")

        recipient = context.recipient
        if not recipient:
            logging.warning(f"Request {request_id}: No logistics contact email supplied.")

        return EmailMessage(
            to=[recipient] if recipient else [],
            cc=list(DEFAULT_CC) or None,
            subject=context.email_subject,
            markdown=markdown
        )
