"""
Products app: product and favorite persistence.
"""
