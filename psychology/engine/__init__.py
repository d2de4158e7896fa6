"""Psychological test scoring engine.

Sub-modules:
- numeric     – rounding and ratio helpers shared by all calculators
- answers     – 75 raw answers → 5×5 category matrix
- profile     – category matrix → 8 tendencies
- portrait    – 8 tendencies → 8 octant areas
- user_result – full per-user result (main octant / tendency lists)
- pair        – two-person relationship metrics
- team        – team metrics and candidate selection
"""
