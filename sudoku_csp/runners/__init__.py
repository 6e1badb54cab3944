"""
Entrypoints: solve functions, result structures and the command-line driver.
"""
