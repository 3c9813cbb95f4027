"""
Veterinary clinic backend.

Authentication, role-based authorization and CRUD endpoints for users,
veterinarians, pets and appointments.
"""
