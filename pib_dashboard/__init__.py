"""
Core package for the PIB critical minerals dashboard.

Submodules provide data loading, filtering, aggregation, view projections and
user interface rendering helpers that are orchestrated by the top-level
`app.py`.
"""
