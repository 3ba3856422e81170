"""
Core Package

Data models, payload validation and serialization shared by the
worksheet builder.
"""
