"""
Services layer - Business logic goes here.
Keep services focused on one concern each (classification, windows, trends, lookups).

DESIGN PRINCIPLE:
- Services contain business logic, NOT routes
- Services never write district records back to the store
- Query errors are typed (see errors.py) and mapped to HTTP in app.main
"""
