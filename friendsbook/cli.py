"""Interactive menu for the FriendsBook social network."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from friendsbook.directory import MemberDirectory
from friendsbook.profile import Profile

_MENU = (
    "\n----Welcome to FriendsBook!\n\n"
    "\nEnter ...\n"
    "j -> to join FriendsBook by creating a profile.\n"
    "l -> to leave FriendsBook.\n"
    "s -> to search for a friend on FriendsBook.\n"
    "m -> to modify your profile on FriendsBook.\n"
    "p -> to print all members on FriendsBook.\n"
    "x -> to exit FriendsBook.\n\n"
)

_INVALID_USERNAME = (
    "'{}' is not a valid userName. A userName must have a lower case letter "
    "as its first character. Please, try again!."
)


class _Input:
    """Character-level reader over a text stream, with one-character pushback."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _getc(self) -> str:
        if self._pending:
            char, self._pending = self._pending, ""
            return char
        return self._stream.read(1)

    def _ungetc(self, char: str) -> None:
        self._pending = char

    def skip_whitespace(self) -> None:
        """Discard leading whitespace, newlines included; raise EOFError at end of input."""
        while True:
            char = self._getc()
            if not char:
                raise EOFError
            if not char.isspace():
                self._ungetc(char)
                return

    def char(self) -> str:
        """Return the next non-whitespace character."""
        self.skip_whitespace()
        return self._getc()

    def word(self) -> str:
        """Return the next whitespace-delimited word."""
        self.skip_whitespace()
        chars = []
        while True:
            char = self._getc()
            if not char:
                break
            if char.isspace():
                self._ungetc(char)
                break
            chars.append(char)
        return "".join(chars)

    def line(self, *, allow_eof: bool = False) -> str:
        """Return the rest of the current line, without its newline."""
        chars = []
        while True:
            char = self._getc()
            if not char:
                if not chars and not allow_eof:
                    raise EOFError
                break
            if char == "\n":
                break
            chars.append(char)
        return "".join(chars)

    def trimmed_line(self) -> str:
        """Skip leading whitespace, then return the rest of the line."""
        self.skip_whitespace()
        return self.line()

    def ignore_line(self, limit: int = 256) -> None:
        """Discard up to ``limit`` characters, stopping after a newline."""
        for _ in range(limit):
            char = self._getc()
            if not char or char == "\n":
                return


class Session:
    """One interactive session over a member directory."""

    def __init__(
        self,
        members: MemberDirectory | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.members = members if members is not None else MemberDirectory()
        self._in = _Input(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _say(self, text: str) -> None:
        self._out.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._in.trimmed_line()

    def join(self) -> None:
        """Create a profile for a new member."""
        username = self._ask(
            "Please, enter a userName (first character must be a lower case letter) : "
        )
        candidate = Profile(username)
        if not candidate.is_valid():
            self._say(_INVALID_USERNAME.format(username))
            return
        if self.members.search(candidate) is not None:
            self._say(
                f"Member: '{candidate.username}' was unable to joined FriendsBook "
                "(she/he may already be a member?)"
            )
            return
        name = self._ask("Please, enter your name : ")
        email = self._ask("Please, enter your email : ")
        birthday = self._ask("Please, enter your birthday : ")
        member = Profile(username, name, email, birthday)
        if self.members.insert(member):
            self._say(f"Member: '{member.username}' has successfully joined FriendsBook.")
        else:
            self._say(
                f"Member: '{member.username}' was unable to joined FriendsBook "
                "(she/he may already be a member?)"
            )

    def leave(self) -> None:
        """Remove a member."""
        username = self._ask("Please, enter the username of the member that is leaving: ")
        leaving = Profile(username)
        if not leaving.is_valid():
            self._say(_INVALID_USERNAME.format(username))
        elif self.members.remove(leaving):
            self._say(f"Friend : '{leaving.username}' has now left this social network.")
        else:
            self._say(f"Friend : '{leaving.username}' is not a member of this social network!")

    def search(self) -> None:
        """Look a member up by user name."""
        username = self._ask("Please, enter the username of the member you are looking for: ")
        wanted = Profile(username)
        if not wanted.is_valid():
            self._say(_INVALID_USERNAME.format(username))
            return
        found = self.members.search(wanted)
        if found is not None:
            self._say(f"Member: '{found.username}' has been successfully found in FriendsBook.")
        else:
            self._say(f"'{username}' is not a member of FriendsBook.")

    def modify(self) -> None:
        """Change a member's name, email and birthday; empty answers keep the old value."""
        self._write("Please, enter the username of the profile to be modified: ")
        username = self._in.word()
        self._in.ignore_line()
        wanted = Profile(username)
        if not wanted.is_valid():
            self._say(_INVALID_USERNAME.format(username))
            return
        target = self.members.search(wanted)
        if target is None:
            self._say(f"Member : '{wanted.username}' is not a member of FriendsBook.")
            return

        self._say(f"Modifying member's name '{target.name}'")
        self._write("Please enter new name for this profile (press ENTER to skip): ")
        answer = self._in.line(allow_eof=True)
        if answer:
            target.name = answer

        self._say(f"Modifying member's email '{target.email}'")
        self._write("Please, enter the new email of this member (press ENTER to skip): ")
        answer = self._in.line(allow_eof=True)
        if answer:
            target.email = answer

        self._say(f"Modifying member's birthday '{target.birthday}'")
        self._write("Please, enter the new birthday of this member(press ENTER to skip): ")
        answer = self._in.line(allow_eof=True)
        if answer:
            target.birthday = answer

    def show(self) -> None:
        """Print the member count and every member in user name order."""
        self._say("Printing FriendsBook")
        self._say(f"\nThere are now {len(self.members)} friends in FriendsBook.")
        self._write(self.members.render())

    def run(self) -> None:
        """Show the menu and carry out choices until the user exits or input ends."""
        actions = {
            "j": self.join,
            "l": self.leave,
            "s": self.search,
            "m": self.modify,
            "p": self.show,
        }
        try:
            while True:
                self._write(_MENU)
                self._write("Your choice: ")
                choice = self._in.char().lower()
                self._say("")
                if choice == "x":
                    self._say("\n----Bye!\n")
                    return
                action = actions.get(choice)
                if action is None:
                    self._say("Not sure what you mean! Please, try again!")
                else:
                    action()
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Run an interactive FriendsBook session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="friendsbook", description="Interactive FriendsBook social network."
    )
    parser.parse_args(argv)
    Session(MemberDirectory(), sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())