"""
coursecatalog: in-memory course catalog grouped by category.
"""
