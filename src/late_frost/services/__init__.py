"""
Shared service utilities.

- http.py - requests session with retry/backoff and default timeout
"""
