"""
Core module for the shared kernel.

This module contains:
- Domain events, exceptions and value objects
- The in-memory event bus and its audit/cache handlers
- Authentication, observability and metrics middleware
- Health checks and management commands
"""
