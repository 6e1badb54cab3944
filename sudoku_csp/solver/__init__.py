"""
Solver module for Sudoku grids.

This module provides the MRV/LCV backtracking search and an ILP reference
solver that both turn a puzzle grid into a completed grid.
"""
