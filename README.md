# tinyhttpd

tinyhttpd is a small blocking HTTP server. It answers every connection
with the same fixed HTML page and prints each request it reads to
standard output.

The package also holds a simple parser for HTTP requests and the plain
data structures that parser is built on.

## Installation

```
pip install .
```

## Running the server

```
tinyhttpd
```

By default the server binds to all interfaces on port 80 with a listen
backlog of 10. On most systems a port below 1024 needs elevated
privileges. Before serving it prints the response it will send. While it
waits it prints `===== WAITING FOR CONNECTION =====`; for each connection
it prints `===== CONNECTION SUCCESS =====`, reads up to 30000 bytes of the
request, prints them, sends the page and closes the connection.

Options:

- `--host ADDRESS`: address to bind (default: all interfaces).
- `--port PORT`: port to listen on (default: 80).
- `--backlog N`: listen backlog (default: 10).
- `--max-connections N`: stop after answering N connections; without it
  the server runs until interrupted.
- `--hello-world`: send a plain "Hello, World !" response instead of the
  default page.

If the socket cannot be created, bound or set to listen, the command
prints the error to standard error and exits with status 1.

## What it does not do

The server does not look at the request it reads: there is no routing,
no file serving and no status other than `200 OK`. Every connection gets
the same fixed response. The request parser is a separate library piece;
the server does not call it.

## Using it as a library

Start a server with your own launch function:

```python
from tinyhttpd.server import Server
from tinyhttpd.app import handle_connection, build_response


def launch(server):
    response = build_response()
    while True:
        connection, _ = server.socket.accept()
        handle_connection(connection, response)


with Server(host="127.0.0.1", port=8080, backlog=10, launch=launch) as server:
    server.run()
```

`Server` binds and listens as soon as it is created; `server.address`
holds the bound address. `run()` calls the launch function with the
server and returns what it returns. If the socket cannot be created,
bound or set to listen, `Server` raises `ServerError`.

`tinyhttpd.app.launch(server, max_connections=None)` is the ready-made
launch function that serves the fixed page; `hello_world_response()`
returns the alternative response.

Parse a raw request (lines end in `\n`, the head ends in a blank line):

```python
from tinyhttpd.http_request import parse_request, parse_form_urlencoded

request = parse_request(
    "POST /login HTTP/1.1\n"
    "Content-Type: application/x-www-form-urlencoded\n"
    "\n"
    "user=alice&lang=en"
)
request.method                          # "POST"
request.uri                             # "/login"
request.header_fields.search("Content-Type")
request.body.search("user")             # "alice"

parse_form_urlencoded("a=1&b=2").search("b")   # "2"
```

With a form-urlencoded `Content-Type` the body is split into fields; with
any other `Content-Type` the whole body is stored under `"data"`; with
none, the body map is empty. An empty request or a malformed request line
raises `ValueError`.

The data structures are available on their own:

- `tinyhttpd.linked_list.LinkedList`: a singly linked list with
  `insert`, `remove` and `retrieve` by index; bad indexes raise
  `IndexError`. It supports `len()` and iteration.
- `tinyhttpd.queues.Queue`: a first-in, first-out queue with `push`,
  `peek` and `pop`; `peek` and `pop` on an empty queue raise `IndexError`.
- `tinyhttpd.bst.BinarySearchTree`: an unbalanced binary search tree
  ordered by a three-way compare function such as `compare_strings`;
  equal items are stored once, and iteration yields items in order.
- `tinyhttpd.dictionary.Dictionary`: a key/value map stored in that tree,
  ordered by `compare_string_keys` by default. The first value inserted
  for a key is kept; `search` returns `None` for a missing key, and
  `in`, iteration over keys and `items()` are supported.

## Running the tests

```
pip install ".[test]"
pytest
```