"""
Response DTOs

Payloads returned by the vehicle endpoints, built from domain aggregates.
Field names are camelCase on the wire and status is exposed by label.
"""
