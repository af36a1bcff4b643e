"""Utility modules for middleware alert sync."""
from utils.logger import setup_logging
from utils.http_client import HTTPClient, APIError
