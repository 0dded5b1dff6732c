"""
Orders Application Layer
"""
