"""
Services Package

Business logic kept separate from HTTP handling:
- orders.py: order placement and enriched order listing
- rate_limiter.py: rate limiting with slowapi
- security.py: password hashing and JWT utilities
"""
