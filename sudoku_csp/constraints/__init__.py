"""
Incremental constraint tracking (forbidden-value mask and counts).
"""
