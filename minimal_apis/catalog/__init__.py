"""
Catalog service: categories, products and a JWT login endpoint.
"""
