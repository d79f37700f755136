import io

from greeter.models import UserRecord
from greeter.users import USERS, format_user, print_users


def test_fixed_users_in_insertion_order():
    assert [(u.name, u.age) for u in USERS] == [("Alice", 30), ("Bob", 25)]
    assert [u.id for u in USERS] == [1, 2]


def test_format_user():
    assert format_user(UserRecord(id=7, name="Carol", age=41)) == "User: Carol, Age: 41"


def test_print_users_to_stdout(capsys):
    print_users()
    assert capsys.readouterr().out == "User: Alice, Age: 30\nUser: Bob, Age: 25\n"


def test_print_users_to_stream_keeps_order():
    buf = io.StringIO()
    users = [UserRecord(id=2, name="Zed", age=1), UserRecord(id=2, name="Amy", age=-5)]
    print_users(users, stream=buf)
    assert buf.getvalue() == "User: Zed, Age: 1\nUser: Amy, Age: -5\n"


def test_print_no_users_writes_nothing():
    buf = io.StringIO()
    print_users([], stream=buf)
    assert buf.getvalue() == ""
