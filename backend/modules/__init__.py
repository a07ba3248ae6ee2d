"""
Feature modules for the Tiriwe backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for external collaborators
- models.py: Pydantic models for data transfer
- service.py / gate.py: Business logic implementation
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
