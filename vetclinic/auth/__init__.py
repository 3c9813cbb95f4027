"""
Authentication module for the veterinary clinic system.

This module provides authentication and authorization functionality including:
- Local registration and login with bcrypt-hashed passwords
- Google sign-in through verified ID tokens
- Signed, time-limited session tokens
- Role-based access control backed by the user-role join table
"""
