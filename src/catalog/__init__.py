"""
Catalog Bounded Context
Categories and products
"""
