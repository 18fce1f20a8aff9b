"""
Services layer - business logic between the routes and the document store.

DESIGN PRINCIPLE:
- Services contain business logic, NOT routes
- Each service call maps to a single store operation
"""
