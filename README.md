# scaffoldkit

Small building blocks for starting a new service, and a command-line tool
that sets up a Go multi-module workspace (`go.work`) and creates new modules
in it from templates.

## Installation

```
pip install scaffoldkit
```

To run the test suite:

```
pip install "scaffoldkit[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `scaffoldkit-hello` | Prints `Hello, World!`. |
| `scaffoldkit-workspace init` | Asks for the root workspace repository, runs `go work init` in the current directory and writes `// <root>` as the first line of `go.work`. |
| `scaffoldkit-workspace clone` | Walks up from the current directory to the nearest `go.work`, asks for a template (by number or name) and a module name, runs `gonew` to create the module, then appends a `use <path>` line to `go.work`. |
| `scaffoldkit-func` | Serves `/api/HttpExample` over plain HTTP. The port comes from `FUNCTIONS_CUSTOMHANDLER_PORT`, or 8080 when it is unset. |

`scaffoldkit-workspace` with no command prints its usage. It needs `go`
(for `init`) and `gonew` (for `clone`) on your `PATH`. Templates are fetched
from the repository named by the `SCAFFOLD_TEMPLATE_REPOSITORY` environment
variable (default `example.com/templates`); the template name has its dashes
removed and is appended to it. The available templates are listed in
`scaffoldkit.workspace.TEMPLATE_OPTIONS`.

The same steps are available as functions in `scaffoldkit.workspace`:
`read_root_workspace(data)`, `find_workspace(start)` (raises
`FileNotFoundError` when no workspace file is found), `template_name(option)`,
`init_workspace(root, directory)` and `clone_template(template, module_name, start)`.

## Library

### MongoDB filter documents — `scaffoldkit.querybuilder`

Documents are plain dicts. A `Builder` collects operators for one field;
setting the same operator twice keeps the last value.

```python
from scaffoldkit.querybuilder import Builder, and_, or_, box

adults = Builder("age").gte(18).lt(65).build()      # {"age": {"$gte": 18, "$lt": 65}}
named = Builder("name").in_("alice", "bob").build()
query = and_(adults, named)

inside = Builder("location").geo_within(box((0.0, 0.0), (10.0, 10.0))).build()
either = or_(query, inside)
```

Builder methods: `gt`, `gte`, `lt`, `lte`, `eq`, `ne`, `in_`, `nin`,
`exists`, `type_`, `geo_intersects`, `geo_within`, `near` and `near_sphere`
(the last two take optional `min_distance` and `max_distance`). A builder with
no conditions builds `{field: None}`.

Functions: `and_`, `or_`, `not_`, `nor`, `text_search` (options left as
`None` are omitted), `geometry`, `geometry_collection`, `box` and `center`.
Coordinates must be pairs; anything else raises `ValueError`. The module also
defines `TYPE_*` constants for BSON type numbers and `GEOMETRY_*` constants
for GeoJSON type names.

### Registry credentials — `scaffoldkit.registry`

`auth_string(username, password)` returns the URL-safe base64 encoding of
`{"username":"...","password":"..."}`, as image registries expect. The values
are inserted without JSON escaping.

### Console logging — `scaffoldkit.logkit`

```python
from scaffoldkit import logkit

logkit.init("billing", logkit.Level.INFO)
logkit.system_start({"port": 8080})
logkit.write(logkit.Kind.EVENT, logkit.EventType.USER_LOGIN, logkit.Level.INFO, user="alice")
logkit.system_shutdown("signal received")
```

After `init`, each record goes to standard error as one line: a timestamp, a
three-letter level (`DBG`, `INF`, `WRN`, `ERR`, `FTL`, `PNC`) and sorted
`key=value` fields, always including `app`, `kind` and `type`. Non-string
values are written as JSON. `get_logger()` returns the underlying
`logging.Logger`; before `init` it discards everything.

### HTTP client — `scaffoldkit.httpclient`

```python
from scaffoldkit.httpclient import HttpClient

with HttpClient(timeout=5) as client:
    client.with_cookie("https://api.example.com/", ("session", "token"))
    response = client.get("https://api.example.com/items")
    client.post("https://api.example.com/items", "application/json", b'{"name": "x"}')
```

`HttpClient` wraps a pooled `requests.Session` (default timeout 5 seconds).
`get`, `post`, `put`, `patch` and `delete` return `requests.Response`
objects. `with_cookie(url, *cookies)` takes `http.cookiejar.Cookie` objects
or `(name, value)` pairs and raises `ValueError` for a URL without a host;
`reset_cookie()` empties the jar and `cookies` exposes it. `close()` (or
leaving the `with` block) closes pooled connections.

### Ollama client — `scaffoldkit.ollama`

```python
from scaffoldkit.ollama import OllamaClient, OllamaConfig

client = OllamaClient(OllamaConfig())
print(client.generate("Write a haiku about templates"))

chat = client.start_chat(["You answer in one sentence."])
print(chat.send_message("What is a workspace?"))

vector = client.embedding("some text")
```

The default endpoint is `http://localhost:11434` and the model is `gemma2`.
`OllamaConfig.timeout` is in seconds; `None` waits forever. Generation and
chat are streamed and joined into one string. A `ChatSession` keeps the
system prompts and every user message in `messages`; the model's replies are
not added to it. Server errors raise `RuntimeError`.

### Web application — `scaffoldkit.web`

`create_app()` returns a Flask application whose `/` route (`index`)
answers `{"message": "Hello, World!"}`, with CORS enabled for every origin and
the methods `GET`, `POST`, `PUT`, `DELETE`.

`enable_cors(app, origins, methods, headers)` adds CORS handling to any Flask
app: credentials are allowed, preflight `OPTIONS` requests get `204` with a
twelve-hour max age, and requests from origins not in the list are refused
with `403`. An origin of `"*"` admits all origins.

### HTTP function — `scaffoldkit.function`

`hello_message(name)` builds the reply text (a personalised greeting when a
name is given) and `listen_address(environ)` returns `":<port>"` from the
environment. `main()` is what `scaffoldkit-func` runs; the `name` query
parameter is passed to `hello_message`, and any other path answers `404`.

### SQL helpers — `scaffoldkit.sqlqueries`

Works with any DB-API connection or cursor that uses `?` placeholders.

```python
import sqlite3
from scaffoldkit.sqlqueries import Queries

conn = sqlite3.connect(":memory:")
conn.execute("CREATE TABLE authors (id INTEGER PRIMARY KEY, name TEXT NOT NULL, bio TEXT)")

queries = Queries(conn)
author_id = queries.create_author("Ada", "Wrote the first program")
for author in queries.list_authors():
    print(author.id, author.name, author.bio)
```

`create_author` returns the new row id, `get_author` returns an `Author` or
raises `AuthorNotFoundError`, `list_authors` orders by name, `delete_author`
removes a row and `with_tx(tx)` returns queries bound to another connection
or transaction. `create_person(conn)` creates the `person` table and
`find_ages(conn, name)` returns the ages recorded for a name.

## What it does not do

scaffoldkit does not open or manage connections to database servers, caches,
message brokers, object stores or container engines: the SQL helpers take a
connection you create yourself, and for image registries only the credential
string is provided (no pulling or pushing). The web application and the HTTP
function serve plain HTTP only; there is no TLS or proxy-protocol listener.