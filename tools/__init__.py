"""
Tools Gateway Package

Provides unified interfaces for the file system and the user database.
"""

from .filesystem_tool import FileSystemGateway, FileReadResult
from .user_tool import UserAccountGateway, UserAccount

__all__ = [
    # File system
    'FileSystemGateway',
    'FileReadResult',
    # Users
    'UserAccountGateway',
    'UserAccount',
]
