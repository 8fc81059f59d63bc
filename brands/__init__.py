"""
Brands module - Brand, Product and Favorite management.

This module handles:
- Brand, Product and Favorite entities and domain logic
- The brand lifecycle manager (sole writer of brand status)
- Repository ports and their Django ORM adapters
- Owner, admin, public catalog and favorites handlers
"""
