"""
Brand Directory Service Django project.
"""
