"""Identity HTTP layer"""
