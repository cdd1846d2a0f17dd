"""
Products API backend package.
"""
