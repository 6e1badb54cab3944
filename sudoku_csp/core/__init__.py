"""
Grid representation and text IO.
"""
