"""
Identity Domain Layer
"""
