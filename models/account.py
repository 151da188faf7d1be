"""Account model: one user's link to one external financial account."""

from typing import Optional

from exceptions import IdentityAlreadyAssignedError, StorageError, ValidationError


def _is_positive_int(value) -> bool:
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class Account:
    """A financial account owned by a user.

    ``account_id`` and ``user_id`` are read-only. ``account_id`` stays None
    until the storage engine persists the record and calls ``assign_id``.
    The remaining fields are plain attributes where None means unset and ""
    is a real, empty value.

    The raw account number is never held here, only ``account_no_hash``.

    Attributes:
        institution: Name of the institution holding the account.
        account_no_hash: One-way hash of the account number.
        currency: Currency code, e.g., "USD". Not validated.
        nickname: User-assigned display label.

    Raises:
        ValidationError: If user_id is missing or not a positive integer.
    """

    def __init__(
        self,
        user_id: int,
        institution: Optional[str] = None,
        account_no_hash: Optional[str] = None,
        currency: Optional[str] = None,
        nickname: Optional[str] = None,
    ):
        if user_id is None:
            raise ValidationError("user_id is required")
        if not _is_positive_int(user_id):
            raise ValidationError(
                f"user_id must be a positive integer, got {user_id!r}"
            )

        self._user_id = user_id
        self._account_id = None
        self.institution = institution
        self.account_no_hash = account_no_hash
        self.currency = currency
        self.nickname = nickname

    @classmethod
    def create(
        cls,
        user_id: int,
        institution: Optional[str] = None,
        account_no_hash: Optional[str] = None,
        currency: Optional[str] = None,
        nickname: Optional[str] = None,
    ) -> "Account":
        """Create a new, not yet persisted account.

        Args:
            user_id: ID of the owning user. Must be a positive integer.
            institution: Optional institution name.
            account_no_hash: Optional hash of the account number.
            currency: Optional currency code.
            nickname: Optional display label.

        Returns:
            Account with account_id unset.

        Raises:
            ValidationError: If user_id is missing or not a positive integer.
        """
        return cls(
            user_id=user_id,
            institution=institution,
            account_no_hash=account_no_hash,
            currency=currency,
            nickname=nickname,
        )

    @classmethod
    def from_row(cls, row: tuple) -> "Account":
        """Rebuild a persisted account from a database row.

        Row order: account_id, user_id, institution, account_no_hash,
        currency, nickname.
        """
        account = cls(
            user_id=row[1],
            institution=row[2],
            account_no_hash=row[3],
            currency=row[4],
            nickname=row[5],
        )
        account.assign_id(row[0])
        return account

    @property
    def account_id(self) -> Optional[int]:
        return self._account_id

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def is_persisted(self) -> bool:
        return self._account_id is not None

    def assign_id(self, account_id: int) -> None:
        """Give this record its permanent identity.

        Called by the storage engine once the record is durably created.
        No other field is touched.

        Raises:
            IdentityAlreadyAssignedError: If the record already has an ID.
            StorageError: If account_id is not a positive integer.
        """
        if self._account_id is not None:
            raise IdentityAlreadyAssignedError(
                f"Account already has ID {self._account_id}"
            )
        if not _is_positive_int(account_id):
            raise StorageError(
                f"account_id must be a positive integer, got {account_id!r}"
            )
        self._account_id = account_id

    def to_dict(self) -> dict:
        """Convert account to dictionary for database storage."""
        return {
            "account_id": self.account_id,
            "user_id": self.user_id,
            "institution": self.institution,
            "account_no_hash": self.account_no_hash,
            "currency": self.currency,
            "nickname": self.nickname,
        }

    def __eq__(self, other):
        if not isinstance(other, Account):
            return NotImplemented
        if self is other:
            return True
        # Unpersisted records have no identity to compare
        if self._account_id is None or other._account_id is None:
            return False
        return self._account_id == other._account_id

    def __hash__(self):
        if self._account_id is None:
            return object.__hash__(self)
        return hash((Account, self._account_id))

    def __repr__(self):
        return (
            f"Account(account_id={self.account_id!r}, user_id={self.user_id!r}, "
            f"institution={self.institution!r}, currency={self.currency!r}, "
            f"nickname={self.nickname!r})"
        )
