"""
Data Transfer Objects (DTOs) Layer

Wire-level models for the HTTP API, kept apart from both the Vehicle
aggregate and the stored VehicleDocument so each can change on its own.

Structure:
- request/: Incoming request bodies
- response/: Outgoing payloads
"""
