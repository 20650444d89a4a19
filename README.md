# nodekit

Small building blocks for event-driven Python programs. The package uses only
the standard library.

## Modules

- `nodekit.array`: `Array` is a list with JavaScript-style helpers: `push`,
  `pop`, `shift`, `unshift`, `insert`, `erase`, `slice`, `splice`, `find`,
  `index_of`, `count`, `reduce`, `some`, `every`, `none`, `remove`, `replace`,
  `reverse`, `sort` and `join`. Integer indexes wrap around the length.
  `split_on(text, ch)` and `split_every(text, size)` split strings into an
  `Array`.
- `nodekit.iterator`: `map_each`, `count`, `reduce`, `every`, `some`, `none`
  and `join`. Each one works over its positional arguments.
- `nodekit.events`: `Event` holds listeners that you add with `on` (or by
  calling the event) and with `once`. You remove a listener with `off`, remove
  all of them with `clear`, and call them in the order they were added with
  `emit`. When the listener limit is reached, `on` and `once` return None.
- `nodekit.expected`: `Expected` holds either a value or an error. You build
  one with `Expected.ok` or `Expected.fail` and check it with `has_value`.
- `nodekit.ordered_map`: `OrderedMap` keeps its keys in insertion order.
  Reading a key that is missing adds it with the value None.
- `nodekit.observer`: `Observer` holds a fixed set of named fields. `set`
  calls the listeners of that field with `(old, new)`. `update` applies the
  fields returned by a function.
- `nodekit.testing`: `TestSuite` runs named callbacks in order. A callback
  passes when it returns 1 and fails when it returns -1 or raises. Any other
  result counts as skipped. `run` writes a report and returns a list of
  `(name, Outcome)` pairs.
- `nodekit.utf`: conversions between UTF-8 bytes, UTF-16 code units and
  UTF-32 code points.
- `nodekit.compress`: `ZStream` is an incremental deflate or inflate stream.
  The one-shot helpers are `deflate` and `inflate` (raw), `gzip`, and
  `gunzip`, which accepts both gzip and zlib headers.
- `nodekit.envfile`: `parse_env` reads `KEY=VALUE` text and `load_env_file`
  stores a file's entries in the environment. `is_child`, `is_parent`, `home`
  and `shell` read the environment.
- `nodekit.http`: `status_text`, `capital_case`, `parse_query`, `parse_head`
  (returns an `HttpMessage`), `format_request_head`, `format_response_head`,
  and `format_fetch`, which serialises a `FetchRequest`.
- `nodekit.dns`: `lookup`, `lookup_ipv4`, `lookup_ipv6`, and the pattern
  checks `is_ipv4`, `is_ipv6` and `is_ip`.
- `nodekit.popen`: `start` launches a program with pipes on all of its
  streams. `capture` runs a program and returns its standard output.
- `nodekit.conio`: `Console` writes coloured text using ANSI escapes. Colours
  come from `Color`.
- `nodekit.worker`: `Worker` calls a function on a background thread again and
  again until the function returns a negative number or `close` is called.
  `active_workers` reports how many workers are running.
- `nodekit.process`: `parse_argv` and `start` separate plain arguments from
  `?key=value` arguments, and `start` stores the latter in the environment.

## Examples

```python
from nodekit.array import Array

items = Array([3, 1, 2])
items.push(4)
print(items.join(", "))             # 3, 1, 2, 4
print(items.some(lambda x: x > 3))  # True
```

```python
from nodekit.events import Event

ready = Event()
ready.on(lambda name: print("hello", name))
ready.once(lambda name: print("first time only"))
ready.emit("world")
ready.emit("again")
```

```python
from nodekit.observer import Observer

state = Observer({"count": 0})
state.on("count", lambda old, new: print(old, "->", new))
state.set("count", 1)
print(state.get("count"))
```

```python
from nodekit.compress import gzip, gunzip

print(gunzip(gzip(b"hello hello hello")))  # b'hello hello hello'
```

```python
from nodekit.utf import utf8_to_utf32, utf32_to_utf8

codepoints = utf8_to_utf32("héllo".encode("utf-8"))
print(utf32_to_utf8(codepoints))  # b'h\xc3\xa9llo'
```

```python
from nodekit.http import status_text, format_response_head

print(status_text(404))  # Not Found
print(format_response_head("HTTP/1.1", 200, {"content-type": "text/plain"}))
```

## Errors

| Exception | Module | Raised when |
| --- | --- | --- |
| `ExpectedError` | `nodekit.expected` | the side of an `Expected` that is not there is read |
| `FieldNotFound` | `nodekit.observer` | a field that was never declared is read or set |
| `UnicodeConversionError` | `nodekit.utf` | the input is malformed in its encoding |
| `CompressionError` | `nodekit.compress` | a stream cannot be set up or the data is corrupt |
| `HttpError` | `nodekit.http` | a status code is unknown or a message head is malformed |

## What it does not do

The package has no event loop and does no networking of its own. It contains
no TCP or TLS sockets, no HTTP server, and no HTTP client. `nodekit.http` only
parses and formats message heads, and you send the bytes yourself. Apart from
`nodekit.dns`, which resolves names through the system resolver, nothing in
the package opens a connection. The package installs no command-line programs.