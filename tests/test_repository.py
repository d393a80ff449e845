import pytest

from taskhub.database import init_db
from taskhub.models import Task
from taskhub.repository import RepositoryError, TaskNotFoundError, TaskRepository


@pytest.fixture
def connection():
    conn = init_db(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def repo(connection):
    return TaskRepository(connection)


def test_create_assigns_id_and_get_returns_same(repo):
    created = repo.create(Task(user_id=2, title="buy milk", description="2 litres"))
    assert created.id > 0
    assert repo.get(created.id) == created


def test_create_assigns_increasing_ids(repo):
    first = repo.create(Task(user_id=1, title="a"))
    second = repo.create(Task(user_id=1, title="b"))
    assert second.id > first.id


def test_create_with_explicit_id_keeps_it(repo):
    created = repo.create(Task(id=40, user_id=1, title="fixed"))
    assert created.id == 40
    assert repo.get(40).title == "fixed"


def test_create_duplicate_id_raises(repo):
    repo.create(Task(id=5, title="one"))
    with pytest.raises(RepositoryError, match="failed to create task"):
        repo.create(Task(id=5, title="two"))


def test_get_missing_raises_not_found(repo):
    with pytest.raises(TaskNotFoundError, match="^task not found$"):
        repo.get(999)


def test_not_found_is_repository_error():
    assert isinstance(TaskNotFoundError(), RepositoryError)
    assert str(TaskNotFoundError()) == "task not found"


def test_list_returns_all_in_id_order(repo):
    titles = ["x", "y", "z"]
    for title in titles:
        repo.create(Task(user_id=1, title=title))
    listed = repo.list()
    assert [task.title for task in listed] == titles
    assert [task.id for task in listed] == sorted(task.id for task in listed)


def test_list_empty(repo):
    assert repo.list() == []


def test_list_by_user_filters(repo):
    mine = repo.create(Task(user_id=1, title="mine"))
    repo.create(Task(user_id=2, title="theirs"))
    assert repo.list_by_user(1) == [mine]
    assert repo.list_by_user(3) == []


def test_update_overwrites_all_fields(repo):
    created = repo.create(Task(user_id=1, title="old", description="d"))
    changed = Task(id=created.id, user_id=9, title="new", description="", is_done=True)
    assert repo.update(changed) is changed
    assert repo.get(created.id) == changed


def test_update_unknown_id_inserts(repo):
    repo.update(Task(id=77, user_id=3, title="upserted"))
    assert repo.get(77) == Task(id=77, user_id=3, title="upserted")


def test_update_without_id_creates(repo):
    saved = repo.update(Task(user_id=3, title="fresh"))
    assert saved.id > 0
    assert repo.get(saved.id).title == "fresh"


def test_delete_removes_task(repo):
    created = repo.create(Task(user_id=1, title="gone"))
    repo.delete(created.id)
    with pytest.raises(TaskNotFoundError):
        repo.get(created.id)


def test_delete_missing_is_silent(repo):
    kept = repo.create(Task(user_id=1, title="kept"))
    repo.delete(kept.id + 100)
    assert repo.list() == [kept]


@pytest.mark.parametrize(
    ("call", "message"),
    [
        (lambda r: r.list(), "failed to list tasks"),
        (lambda r: r.list_by_user(1), "failed to list tasks by user"),
        (lambda r: r.get(1), "failed to get task"),
        (lambda r: r.create(Task(title="t")), "failed to create task"),
        (lambda r: r.update(Task(id=1, title="t")), "failed to update task"),
        (lambda r: r.delete(1), "failed to delete task"),
    ],
)
def test_closed_connection_raises_repository_error(connection, repo, call, message):
    connection.close()
    with pytest.raises(RepositoryError, match=message):
        call(repo)