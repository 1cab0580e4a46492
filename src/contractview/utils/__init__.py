#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/utils/__init__.py
"""Utility helpers for contractview."""
