"""
Random user page loader.

This package contains:
- config: settings loaded from .env / environment variables
- api_client: HTTP client for the RandomUser API
- page: the page-load hook that hands users to the page
"""
