"""
Accounts module - principals, credentials and tokens.

This module handles:
- Principal entity and the role/brand binding invariant
- Credential store and token codec (ports)
- Account provisioning, sign-in and authentication
- Accounts infrastructure (Django ORM and JWT adapters)
"""
