"""
Shared Layer - Cross-Cutting Concerns
Domain contracts, application bases, infrastructure and HTTP utilities
"""
