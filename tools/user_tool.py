"""
User Account Gateway - Enumerate local OS user accounts
"""

import pwd
import logging
from typing import List, Optional, Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class UserAccount:
    """One local user account."""
    username: str
    uid: str
    directory: str


class UserAccountGateway:
    """Gateway for the local password database."""

    def list_users(self, uids: Optional[Iterable[str]] = None) -> List[UserAccount]:
        """
        List user accounts

        Args:
            uids: if given, only accounts whose uid is one of these values

        Returns:
            UserAccount list, empty if the database cannot be read
        """
        wanted = set(uids) if uids else None

        try:
            entries = pwd.getpwall()
        except OSError as e:
            logger.warning(f"Failed to enumerate users: {e}")
            return []

        users = []
        for entry in entries:
            uid = str(entry.pw_uid)
            if wanted is not None and uid not in wanted:
                continue
            users.append(UserAccount(
                username=entry.pw_name,
                uid=uid,
                directory=entry.pw_dir
            ))

        logger.debug(f"Enumerated {len(users)} user accounts")
        return users
