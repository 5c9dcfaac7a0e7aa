"""
Async fan-out demo service.

Joins a simulated product lookup with a remote JSON API call in one request.
"""
