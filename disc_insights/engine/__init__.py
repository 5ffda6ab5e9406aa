"""Department analytics engine.

Sub-modules:
- departments     – validation & per-department aggregation
- compatibility   – pairwise department compatibility
- team_composition – strengths, gaps & recommendations
- communication   – communication styles & cross-department tips
- collaboration   – detailed matrix, profile comparison, pair recommendations
"""
