"""A fixed-capacity collection of member profiles, kept in user name order."""

from __future__ import annotations

import bisect
import string
from itertools import chain
from typing import Iterator

from friendsbook.profile import Profile

DEFAULT_CAPACITY = 5
"""Default number of profiles each initial letter can hold."""


class MemberDirectory:
    """Unique profiles grouped by the first letter of the user name.

    Each of the 26 letters has its own bucket holding at most ``capacity``
    profiles, sorted by user name. Buckets do not grow: an insertion into a
    full bucket is refused.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._buckets: dict[str, list[Profile]] = {
            letter: [] for letter in string.ascii_lowercase
        }

    def _bucket(self, profile: Profile) -> list[Profile]:
        key = profile.search_key()
        try:
            return self._buckets[key]
        except KeyError:
            raise ValueError(
                f"user name {profile.username!r} does not start with a lower case letter"
            ) from None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def __iter__(self) -> Iterator[Profile]:
        return chain.from_iterable(self._buckets.values())

    def __contains__(self, profile: object) -> bool:
        return isinstance(profile, Profile) and self.search(profile) is not None

    def insert(self, profile: Profile) -> bool:
        """Add ``profile`` in order; return False if its bucket is full or it is already present."""
        bucket = self._bucket(profile)
        if len(bucket) >= self.capacity or profile in bucket:
            return False
        bisect.insort(bucket, profile)
        return True

    def remove(self, profile: Profile) -> bool:
        """Remove the profile with the same user name; return False if there is none."""
        bucket = self._bucket(profile)
        try:
            bucket.remove(profile)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        """Remove every profile."""
        for bucket in self._buckets.values():
            bucket.clear()

    def search(self, profile: Profile) -> Profile | None:
        """Return the stored profile with the same user name, or None."""
        bucket = self._bucket(profile)
        index = bisect.bisect_left(bucket, profile)
        if index < len(bucket) and bucket[index] == profile:
            return bucket[index]
        return None

    def copy(self) -> MemberDirectory:
        """Return an independent copy holding copies of every profile."""
        duplicate = MemberDirectory(self.capacity)
        for letter, bucket in self._buckets.items():
            duplicate._buckets[letter] = [
                Profile(p.username, p.name, p.email, p.birthday) for p in bucket
            ]
        return duplicate

    def render(self) -> str:
        """Return every profile on its own line, in ascending user name order."""
        return "".join(f"{profile}\n" for profile in self)