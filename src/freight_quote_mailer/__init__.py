"""Freight quote request email template and rendering helpers."""
