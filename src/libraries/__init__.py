"""
Data engineering libraries.
"""
