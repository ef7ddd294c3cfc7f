"""
Data access layer.

Each repository wraps the SQLAlchemy queries for one content kind. Callers
pass the request's ``Session`` explicitly and get ORM objects back; missing
rows surface as ``NotFoundException``.
"""
