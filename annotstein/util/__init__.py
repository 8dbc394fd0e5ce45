"""
Utilities for defining the COCO json schema and writing COCO json text.
"""
