"""
Orders Domain Layer
"""
