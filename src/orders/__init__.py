"""
Orders Bounded Context
Order listing and status lifecycle
"""
