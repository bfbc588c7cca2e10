"""Member profiles of the FriendsBook social network."""

from __future__ import annotations

import string
from functools import total_ordering

DEFAULT_STR_VALUE = "tbd"
"""Value given to every field that was not supplied or was not valid."""

_LOWERCASE = frozenset(string.ascii_lowercase)


def is_valid_username(username: str) -> bool:
    """Return True if ``username`` is non-empty and starts with a lower case letter a to z."""
    return bool(username) and username[0] in _LOWERCASE


@total_ordering
class Profile:
    """A member's profile: user name, name, email address and birthday.

    The user name is the identity of the profile: equality, ordering and
    hashing all depend on it alone. A user name that does not start with a
    lower case letter is replaced by ``DEFAULT_STR_VALUE``.
    """

    __slots__ = ("_username", "name", "email", "birthday")

    def __init__(
        self,
        username: str = DEFAULT_STR_VALUE,
        name: str = DEFAULT_STR_VALUE,
        email: str = DEFAULT_STR_VALUE,
        birthday: str = DEFAULT_STR_VALUE,
    ) -> None:
        self._username = username if is_valid_username(username) else DEFAULT_STR_VALUE
        self.name = name
        self.email = email
        self.birthday = birthday

    @property
    def username(self) -> str:
        """The profile's user name; fixed once the profile is created."""
        return self._username

    def search_key(self) -> str:
        """Return the first character of the user name."""
        return self._username[0]

    def is_valid(self) -> bool:
        """Return True unless the user name is the default placeholder value."""
        return self._username != DEFAULT_STR_VALUE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Profile):
            return NotImplemented
        return self._username == other._username

    def __lt__(self, other: Profile) -> bool:
        if not isinstance(other, Profile):
            return NotImplemented
        return self._username < other._username

    def __gt__(self, other: Profile) -> bool:
        if not isinstance(other, Profile):
            return NotImplemented
        return self._username > other._username

    def __hash__(self) -> int:
        return hash(self._username)

    def __str__(self) -> str:
        return f"{self._username}, {self.name}, {self.email}, born on {self.birthday}"

    def __repr__(self) -> str:
        return (
            f"Profile(username={self._username!r}, name={self.name!r}, "
            f"email={self.email!r}, birthday={self.birthday!r})"
        )