"""
Service layer: business logic for student records.
"""
