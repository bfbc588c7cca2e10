import io
import sys

import pytest

from friendsbook.cli import Session, main
from friendsbook.directory import MemberDirectory
from friendsbook.profile import Profile


def make_session(text, members=None):
    members = members if members is not None else MemberDirectory()
    out = io.StringIO()
    return Session(members, io.StringIO(text), out), members, out


def member(username, name="aName", email="someone@example.com", birthday="aBirthday"):
    return Profile(username, name, email, birthday)


def test_join_adds_member():
    session, members, out = make_session("alice\nAlice A\nalice@example.com\n1 Jan\n")
    session.join()
    found = members.search(Profile("alice"))
    assert found is not None
    assert (found.name, found.email, found.birthday) == ("Alice A", "alice@example.com", "1 Jan")
    assert "Member: 'alice' has successfully joined FriendsBook." in out.getvalue()


def test_join_skips_leading_whitespace_and_blank_lines():
    session, members, _ = make_session("\n\n   bob\n  Bob B\nbob@example.com\nday\n")
    session.join()
    found = members.search(Profile("bob"))
    assert found is not None
    assert found.name == "Bob B"


def test_join_rejects_invalid_username():
    session, members, out = make_session("Bob\n")
    session.join()
    assert len(members) == 0
    assert "'Bob' is not a valid userName." in out.getvalue()


def test_join_rejects_existing_member():
    members = MemberDirectory()
    members.insert(member("alice"))
    session, _, out = make_session("alice\n", members)
    session.join()
    assert len(members) == 1
    assert "Member: 'alice' was unable to joined FriendsBook" in out.getvalue()
    assert "enter your name" not in out.getvalue()


def test_join_refused_when_bucket_full():
    members = MemberDirectory(capacity=1)
    members.insert(member("aa"))
    session, _, out = make_session("ab\nName\nab@example.com\nday\n", members)
    session.join()
    assert len(members) == 1
    assert "Member: 'ab' was unable to joined FriendsBook" in out.getvalue()


def test_leave_removes_member():
    members = MemberDirectory()
    members.insert(member("carol"))
    session, _, out = make_session("carol\n", members)
    session.leave()
    assert Profile("carol") not in members
    assert "Friend : 'carol' has now left this social network." in out.getvalue()


def test_leave_unknown_member():
    session, _, out = make_session("dave\n")
    session.leave()
    assert "Friend : 'dave' is not a member of this social network!" in out.getvalue()


def test_leave_invalid_username():
    session, _, out = make_session("9lives\n")
    session.leave()
    assert "'9lives' is not a valid userName." in out.getvalue()


def test_search_found_and_missing():
    members = MemberDirectory()
    members.insert(member("erin"))
    session, _, out = make_session("erin\nfrank\n", members)
    session.search()
    session.search()
    text = out.getvalue()
    assert "Member: 'erin' has been successfully found in FriendsBook." in text
    assert "'frank' is not a member of FriendsBook." in text


def test_search_default_value_username_is_invalid():
    session, _, out = make_session("tbd\n")
    session.search()
    assert "'tbd' is not a valid userName." in out.getvalue()


def test_modify_updates_and_skips_fields():
    members = MemberDirectory()
    members.insert(member("gina", "Old Name", "gina@example.com", "old day"))
    session, _, out = make_session("gina\nNew Name\n\nnew day\n", members)
    session.modify()
    found = members.search(Profile("gina"))
    assert found.name == "New Name"
    assert found.email == "gina@example.com"
    assert found.birthday == "new day"
    text = out.getvalue()
    assert "Modifying member's name 'Old Name'" in text
    assert "Modifying member's email 'gina@example.com'" in text


def test_modify_unknown_member():
    session, _, out = make_session("hank\n")
    session.modify()
    assert "Member : 'hank' is not a member of FriendsBook." in out.getvalue()


def test_show_lists_members_in_order():
    members = MemberDirectory()
    members.insert(member("zed"))
    members.insert(member("abe"))
    session, _, out = make_session("", members)
    session.show()
    text = out.getvalue()
    assert text.startswith("Printing FriendsBook\n\nThere are now 2 friends in FriendsBook.\n")
    assert text.endswith(members.render())
    assert text.index("abe,") < text.index("zed,")


def test_run_full_session_ends_with_bye():
    script = "j\nivy\nIvy\nivy@example.com\nday\np\nq\nx\n"
    session, members, out = make_session(script)
    session.run()
    text = out.getvalue()
    assert Profile("ivy") in members
    assert "There are now 1 friends in FriendsBook." in text
    assert "Not sure what you mean! Please, try again!" in text
    assert text.endswith("\n----Bye!\n\n")


def test_run_choice_is_case_insensitive():
    session, _, out = make_session("X\n")
    session.run()
    assert out.getvalue().count("----Welcome to FriendsBook!") == 1
    assert out.getvalue().endswith("\n----Bye!\n\n")


def test_run_stops_at_end_of_input():
    session, _, out = make_session("p\n")
    session.run()
    text = out.getvalue()
    assert "----Bye!" not in text
    assert text.count("Your choice: ") == 2


def test_main_uses_standard_streams(monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO("s\njo\nx\n"))
    monkeypatch.setattr(sys, "stdout", out)
    assert main([]) == 0
    assert "'jo' is not a member of FriendsBook." in out.getvalue()


def test_main_rejects_unknown_arguments(monkeypatch):
    monkeypatch.setattr(sys, "stderr", io.StringIO())
    with pytest.raises(SystemExit):
        main(["--bogus"])