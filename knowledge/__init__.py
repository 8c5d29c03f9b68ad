"""
Creciendo Sano knowledge base.

Contains clinical reference data:
- BMI-for-age percentile bands (ages 2-17)
"""
