"""
Authorization module - the single allow/deny policy evaluator.

This module handles:
- The catalogue of protected actions and their scopes
- Resource references and authorization decisions
- The authorization kernel consulted before every protected operation
"""
