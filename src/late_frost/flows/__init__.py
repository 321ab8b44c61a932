"""
Prefect flows.

Flows:
- frost: fetch NASA POWER series per location, compute late-frost events

Usage (local):
    python -m late_frost.flows.frost

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'late-frost/default'
"""
