# friendsbook

An interactive console directory of social-network members. Each member has a
profile with a username, a name, an e-mail address and a birthday. Members are
kept in ascending order of username. They are grouped by the first letter of the
username, and each letter holds a limited number of members (five by default).

## Installing

```
pip install .
```

## Running

```
friendsbook
```

You can also start it with `python -m friendsbook.cli`. The command accepts only
`-h`/`--help`.

A menu is shown, and a single letter picks each action. Upper- and lower-case
letters both work:

```
j -> to join FriendsBook by creating a profile.
l -> to leave FriendsBook.
s -> to search for a friend on FriendsBook.
m -> to modify your profile on FriendsBook.
p -> to print all members on FriendsBook.
x -> to exit FriendsBook.
```

A username is valid only if its first character is a lower-case letter from
`a` to `z`. An invalid username is reported, and the menu is shown again. When
you modify a profile, press ENTER at a prompt to keep the current value. The
session ends on `x` or at the end of input.

## Using it as a library

```python
from friendsbook.profile import Profile, is_valid_username
from friendsbook.directory import MemberDirectory

is_valid_username("alice")     # True
is_valid_username("Alice")     # False

members = MemberDirectory(capacity=5)
members.insert(Profile("alice", "Alice Doe", "alice@example.com", "Jan 1"))
members.insert(Profile("adam", "Adam Roe", "adam@example.com", "Feb 2"))

len(members)                   # 2
[p.username for p in members]  # ['adam', 'alice'], in ascending order
Profile("adam") in members     # True
found = members.search(Profile("alice"))
print(found)                   # alice, Alice Doe, alice@example.com, born on Jan 1

backup = members.copy()        # an independent copy, profiles included
members.remove(Profile("adam"))
members.clear()
print(backup.render(), end="")
```

A `Profile` is identified by its username alone. Equality, ordering and hashing
all depend on it. An invalid username is replaced by the placeholder `"tbd"`,
and `Profile.is_valid()` then returns `False`. Any field you leave out also
defaults to `"tbd"`. `name`, `email` and `birthday` can be changed after a
profile is created, but `username` cannot.

`MemberDirectory.insert` returns `False` for a duplicate username. It also
returns `False` when the bucket for that initial letter already holds
`capacity` members. `remove` returns `False` when the member is absent, and
`search` returns `None` in that case. `search` returns the stored profile
itself, so a change made to it changes the directory entry. A capacity below 1
raises `ValueError`.

The console session can also be driven from code, which helps with scripting or
testing:

```python
import io
from friendsbook.cli import Session
from friendsbook.directory import MemberDirectory

out = io.StringIO()
Session(MemberDirectory(5), io.StringIO("p\nx\n"), out).run()
print(out.getvalue())
```

## What it does not do

Members are held only in memory for the length of a session. Nothing is saved
to disk, and every run starts with an empty directory. A full bucket is never
enlarged.

## Running the tests

```
pip install ".[test]"
pytest
```