# opskit

A small toolbox for everyday operations work:

- an HTTP API client that logs in with a password, keeps the returned
  bearer token and attaches it to every request it sends;
- HTTP fetchers that understand the `words` and `occurrence` JSON pages;
- an iterative DNS resolver that starts at the root servers and follows
  referrals to an authoritative answer;
- helpers for collecting changed files from push webhooks, for creating,
  uploading to and downloading from a storage bucket, and a small
  concurrency demonstration with a locked counter.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `opskit-login`

Fetches a page from an API. When a password is given, the tool first posts
it to `/login` on the same scheme and host, then sends the returned token as
`Authorization: Bearer ...` with the request.

```
opskit-login --url http://localhost:8080/words --password password
```

The response is printed as, for example, `Response: Words: a, b`. An
invalid URL, a failed login, a non-200 status or a body that is not JSON
ends the program with exit status 1 and a message describing the problem,
including the HTTP status and body where there is one. A page name the
client does not know prints `No response` and also exits with status 1.

### `opskit-get`

Fetches a URL, given as a positional argument or with `--url`.

```
opskit-get http://localhost:8080/occurrence
```

By default the `words` or `occurrence` page is decoded and printed as
`Response: ...`. Two alternative modes are available:

- `--raw` prints the HTTP status code and the body as they came back;
- `--describe` prints the parsed page in more detail: the page name and
  words of a `words` page, or each word with its count for an
  `occurrence` page, and `Page not found` for any other page.

Without a URL the usage line is printed and the exit status is 1.

### `opskit-hello`

Prints `hello world!`. When arguments are given, the full argument list
(program name first) and the arguments proper are printed as well.

```
opskit-hello world
```

### `opskit-counter`

Starts several workers that each take a shared lock, increment a counter,
sleep for a random whole number of seconds and report, then prints the
final count.

```
opskit-counter --workers 10 --max-sleep 5
```

`--max-sleep` must be at least 1.

## Library use

```python
from opskit.api import Options, new
from opskit.errors import RequestError

password = "password"
client = new(Options(password=password, login_url="http://localhost:8080/login"))

try:
    page = client.do_get_request("http://localhost:8080/words")
except RequestError as exc:
    print(f"{exc} (HTTP {exc.http_code}): {exc.body}")
else:
    if page is not None:
        print(page.get_response())
```

`do_get_request` returns a `Words` or `Occurrence` page, or `None` when the
page name is not one it knows. A body that is not JSON raises
`RequestError`, which carries the HTTP status code and the body; a non-200
status raises `ValueError`, and a network failure `ConnectionError`.

Other entry points:

- `opskit.httpclient.Client` sends `get` and `post` requests through a
  transport with a `round_trip` method; `RequestsTransport` sends them over
  the network. `parse_request_uri(raw)` checks that a URL is absolute or an
  absolute path and raises `ValueError` otherwise.
- `opskit.pages.parse_response(body, status_code)` decodes a reply body
  into the page it announces.
- `opskit.login.do_login_request(client, request_url, password)` posts the
  password as JSON and returns the token, raising `RequestError` when the
  reply is not JSON or the token is empty.
- `opskit.transport.JWTTransport` logs in on first use and adds the bearer
  header to each request passed to `round_trip`.
- `opskit.webhook.get_files(commits)` returns each file added or modified
  across a list of `HeadCommit`s once, in the order first seen.
- `opskit.s3.create_s3_bucket`, `upload_to_s3_bucket` and
  `download_from_s3` work against any client, uploader and downloader
  objects with the matching methods, and raise `S3Error` on failure.
- `opskit.counter.run_workers(workers, max_sleep)` runs the counter workers
  and returns the final count.
- `opskit.dnsresolver.dns_query(servers, question)` resolves a question
  starting from the given servers; `get_root_servers()` returns the root
  server addresses to start from, and `outgoing_dns_query` sends a single
  non-recursive query.

## What it does not do

The package has no command that runs a DNS server. The resolver is a
library: `opskit.dnsresolver.handle_packet(sock, addr, buf)` resolves one
incoming query packet and sends the answer with the query's ID through
`sock.sendto(..., addr)`, but receiving packets on a UDP socket and calling
it for each one is left to your own code.