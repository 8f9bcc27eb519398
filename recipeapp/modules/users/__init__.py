"""
Users Module - Black Box Interface

Purpose: Manage user records
Interface: exists(), get_user_by_username(), get_user_by_id(), add(), authorize()
Hidden: Record layout, id assignment, password hashing

Replaceable with any user backend (database, directory service, in-memory).
"""

from .users import AddUserResult, User, UserError, UserModule, UserService

__all__ = ["AddUserResult", "User", "UserError", "UserModule", "UserService"]
