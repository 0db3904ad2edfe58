"""Freight quote request renderer"""
import azure.functions as func
from freight_quote_mailer.blueprints.bp_quote_request import bp as quote_request_bp
from freight_quote_mailer.config import apply_log_level

apply_log_level()

app = func.FunctionApp()

# Register the blueprints
app.register_blueprint(quote_request_bp)  # Freight Quote HTTP Trigger
