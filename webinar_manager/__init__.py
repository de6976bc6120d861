"""Webinar management service."""
