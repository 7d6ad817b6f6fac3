# replacement/core/__init__.py

"""Core domain models and utilities used across the replacement service.

This package provides domain types, exceptions, and the defaults loader
shared by the rest of the application.
"""
