# taskhub

The core of a small task-tracking service. Tasks are stored in SQLite. On top
of that storage sit a service layer and a request handler. The handler takes
request objects and returns response objects.

## Installation

```
pip install .
```

To run the test suite, install the test extra as well:

```
pip install ".[test]"
pytest
```

## Modules

- `taskhub.models`
  - `Task` is a dataclass with the fields `id`, `user_id`, `title`,
    `description` and `is_done`.
  - The defaults are `0`, `0`, `""`, `""` and `False`.
- `taskhub.database`
  - `init_db(path)` opens a SQLite database, for example `":memory:"` or a file path.
  - It creates the `tasks` table if the table is missing. It also adds any
    columns the table lacks.
  - It returns the `sqlite3.Connection`.
  - It raises `DatabaseError` if the database cannot be opened or migrated.
- `taskhub.repository`
  - `TaskRepository(connection)` offers `create`, `get`, `list`,
    `list_by_user`, `update` and `delete`.
  - `create` assigns an id when the task has none.
  - `list` and `list_by_user` return tasks ordered by id.
  - `update` saves every field. It inserts the task if it is not stored yet.
  - `delete` of a missing id does nothing.
  - `get` of a missing id raises `TaskNotFoundError`. That error is a
    `RepositoryError` and also a `LookupError`.
  - Any other storage failure raises `RepositoryError`.
- `taskhub.service`
  - `TaskService(repository)` offers `create_task(user_id, title, description)`,
    `get_task`, `list_tasks`, `list_tasks_by_user`, `update_task` and `delete_task`.
  - A new task always starts out with `is_done=False`.
- `taskhub.handler`
  - `Handler(service, user_client)` serves these calls: `create_task`,
    `get_task`, `list_tasks`, `list_tasks_by_user`, `update_task` and `delete_task`.
  - The requests and responses are dataclasses: `CreateTaskRequest`,
    `GetTaskRequest`, `ListTasksRequest`, `ListTasksByUserRequest`,
    `UpdateTaskRequest`, `DeleteTaskRequest`, `CreateTaskResponse`,
    `ListTasksResponse`, `UpdateTaskResponse`, `DeleteTaskResponse`
    and `TaskMessage`.
  - Before it creates a task, the handler calls
    `user_client.get_user(GetUserRequest(id=...))`. If that call raises,
    the result is `RpcError` with `StatusCode.NOT_FOUND`.
  - A failed `get_task` also gives `NOT_FOUND`.
  - Any other failure gives `StatusCode.INTERNAL`.
  - `update_task` stores the task with `user_id` set to 0.
  - Any object with a `get_user(request)` method can serve as the user client.
    It should raise when the user does not exist.

## Example

```python
from taskhub.database import init_db
from taskhub.handler import CreateTaskRequest, Handler, ListTasksByUserRequest
from taskhub.repository import TaskRepository
from taskhub.service import TaskService


class Users:
    def get_user(self, request):
        return {"id": request.id}


connection = init_db(":memory:")
handler = Handler(TaskService(TaskRepository(connection)), Users())

created = handler.create_task(
    CreateTaskRequest(user_id=1, title="Write report", description="Q3 numbers")
)
print(created.task.id, created.task.is_done)  # 1 False

listing = handler.list_tasks_by_user(ListTasksByUserRequest(user_id=1))
print([t.title for t in listing.tasks])  # ['Write report']
```

## What it does not do

- The package provides no network server and no command to start one.
  `Handler` is a plain Python object, and you call it directly.
- It includes no client for a users service. You supply your own object that
  has a `get_user` method.