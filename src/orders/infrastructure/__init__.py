"""
Orders Infrastructure Layer
"""
