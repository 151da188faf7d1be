"""Account service for database operations."""

import hashlib
from typing import List, Optional

from exceptions import (
    EntityNotFoundError,
    IdentityAlreadyAssignedError,
    ValidationError,
)
from logger import get_logger
from models.account import Account

logger = get_logger()

_ACCOUNT_SELECT_FIELDS = (
    "account_id, user_id, institution, account_no_hash, currency, nickname"
)


def hash_account_number(account_number: str) -> str:
    """Hash a raw account number with SHA-256.

    Surrounding whitespace is stripped first so the same number always
    yields the same hash.

    Args:
        account_number: The raw account number.

    Returns:
        Hex digest of the account number.

    Raises:
        ValidationError: If the account number is empty.
    """
    normalized = (account_number or "").strip()
    if not normalized:
        raise ValidationError("account_number cannot be empty")
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db_manager):
        """Initialize the account service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def create(self, account: Account) -> Account:
        """Persist a new account and assign its ID.

        The ID is assigned to the given instance, which is also returned.

        Args:
            account: Unpersisted account, usually built with Account.create().

        Returns:
            The same Account with account_id populated.

        Raises:
            IdentityAlreadyAssignedError: If the account is already persisted.
        """
        if account.is_persisted:
            raise IdentityAlreadyAssignedError(
                f"Account {account.account_id} is already persisted"
            )

        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "INSERT INTO accounts (user_id, institution, account_no_hash, currency, nickname) "
                "VALUES (?, ?, ?, ?, ?)",
                (
                    account.user_id,
                    account.institution,
                    account.account_no_hash,
                    account.currency,
                    account.nickname,
                ),
            )
            conn.commit()
            account.assign_id(cursor.lastrowid)

        logger.info(f"Created account {account.account_id} for user {account.user_id}")
        return account

    def link(
        self,
        user_id: int,
        account_number: str,
        institution: Optional[str] = None,
        currency: Optional[str] = None,
        nickname: Optional[str] = None,
    ) -> Account:
        """Link a financial account to a user.

        Only the hash of account_number is kept.

        Args:
            user_id: ID of the owning user.
            account_number: Raw account number as entered by the user.
            institution: Optional institution name.
            currency: Optional currency code.
            nickname: Optional display label.

        Returns:
            The persisted Account.

        Raises:
            ValidationError: If user_id is invalid or account_number is empty.
        """
        account = Account.create(
            user_id=user_id,
            institution=institution,
            account_no_hash=hash_account_number(account_number),
            currency=currency,
            nickname=nickname,
        )
        return self.create(account)

    def find(self, account_id: int) -> Optional[Account]:
        """Get a single account by ID.

        Args:
            account_id: The account ID to find.

        Returns:
            Account object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_ACCOUNT_SELECT_FIELDS} FROM accounts WHERE account_id = ?",
                (account_id,),
            )
            row = cursor.fetchone()

            if row:
                return Account.from_row(row)
            return None

    def find_by_user(self, user_id: int) -> List[Account]:
        """Get all accounts owned by a user, ordered by ID."""
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_ACCOUNT_SELECT_FIELDS} FROM accounts "
                "WHERE user_id = ? ORDER BY account_id",
                (user_id,),
            )
            return [Account.from_row(row) for row in cursor.fetchall()]

    def find_all(self) -> List[Account]:
        """Get all accounts from the database.

        Returns:
            List of Account objects, ordered by ID.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_ACCOUNT_SELECT_FIELDS} FROM accounts ORDER BY account_id"
            )
            return [Account.from_row(row) for row in cursor.fetchall()]

    def update(self, account: Account) -> Account:
        """Write the mutable fields of a persisted account.

        account_id and user_id are never written.

        Args:
            account: Persisted account carrying the new field values.

        Returns:
            The updated Account.

        Raises:
            EntityNotFoundError: If the account is unpersisted or no longer exists.
        """
        if not account.is_persisted:
            raise EntityNotFoundError("Cannot update an account that was never persisted")

        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "UPDATE accounts SET institution = ?, account_no_hash = ?, currency = ?, "
                "nickname = ? WHERE account_id = ?",
                (
                    account.institution,
                    account.account_no_hash,
                    account.currency,
                    account.nickname,
                    account.account_id,
                ),
            )
            conn.commit()

            if cursor.rowcount == 0:
                raise EntityNotFoundError(f"Account with ID {account.account_id} not found")

        logger.info(f"Updated account {account.account_id}")
        return account

    def delete(self, account_id: int) -> bool:
        """Delete an account by ID.

        Args:
            account_id: The account ID to delete.

        Returns:
            True if account was deleted, False if not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "DELETE FROM accounts WHERE account_id = ?", (account_id,)
            )
            conn.commit()
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Deleted account {account_id}")
        return deleted

    def delete_for_user(self, user_id: int) -> int:
        """Delete every account owned by a user.

        Used when the owning user is removed.

        Returns:
            Number of accounts deleted.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("DELETE FROM accounts WHERE user_id = ?", (user_id,))
            conn.commit()
            count = cursor.rowcount

        logger.info(f"Deleted {count} account(s) for user {user_id}")
        return count
