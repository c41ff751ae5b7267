"""
Shared infrastructure used by the data sources.

- http.py - pre-configured ``requests.Session`` (default timeout, no retries)
"""
