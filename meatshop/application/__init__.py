"""
Application layer: use cases, DTOs and role sessions
"""
