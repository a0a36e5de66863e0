"""
Wine inventory REST API.

Products and ingredients CRUD, spreadsheet import/export and product images.
"""
