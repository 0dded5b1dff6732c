"""
Orders API Layer
"""
