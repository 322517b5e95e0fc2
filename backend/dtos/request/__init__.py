"""
Request DTOs

Shapes of incoming request bodies. Pydantic checks presence and types here;
business rules (plate format, age window, blank customer ids) are left to
the domain so every entry point enforces them the same way.
"""
