# webhttpkit

Small building blocks for writing HTTP clients and servers. They use only the
standard library.

## What is inside

- `webhttpkit.client_state`: the `ClientState` enum, covering the phases of a
  client exchange from `NONE` to `REDIRECTING`. `to_string()` returns a state's
  name. `from_string()` returns the state with a given name and raises
  `ValueError` if no state has that name.
- `webhttpkit.credentials`: `Credentials`, a username and password dataclass
  with `clear()` and `has_credentials()`. `str()` of it gives
  `username:password`.
- `webhttpkit.http_host`: `HTTPHost`, a frozen scheme, host and port triple.
  `secure()` is true for `https` and `wss`. `str()` of it gives
  `[scheme,host,port]`.
- `webhttpkit.http_utils`:
  - `NameValueCollection` is an ordered multi-map that ignores case in names.
    It has `add`, `set`, `get`, `get_all`, `has`, `erase`, `clear` and `copy`.
  - `split_text_plain_post()` parses `name=value` lines.
  - `split_and_url_decode()` and `get_query_map()` parse and percent-decode
    query strings.
  - `make_query_string()` percent-encodes name/value pairs.
  - `dump_headers()` logs header pairs at a chosen logging level.
  - `consume()` reads a stream to its end and returns how much it read.
- `webhttpkit.settings`: `ClientSessionSettings`, a dataclass that holds the
  user agent, the redirect limit (20 by default), keep-alive settings,
  timeouts, progress-update settings and the default headers.
- `webhttpkit.messages`:
  - `Request`, `FormRequest`, `GetRequest` and `HeadRequest`. A request holds
    its headers in `headers` and its form fields in `form`.
  - `Response`, which holds a status, a reason and headers. It classifies the
    status (`is_success()`, `is_redirection()` and so on), checks the content
    type (`is_json()`, `is_xml()`, `is_pixels()`) and gives
    `status_and_reason()`.
- `webhttpkit.processors`: request and response filters that work on a
  `ClientContext`.
  - `DefaultClientHeaders` sets the user agent and the default headers.
  - `DefaultRedirectProcessor` follows 301, 302, 303 and 307 responses. It
    turns POST and PUT into GET. It raises `HTTPError` when the redirect limit
    is reached or the `Location` header is missing.
  - `DefaultEncodingResponseStreamFilter` sends `Accept-Encoding: gzip,
    deflate` and wraps gzip or deflate response streams in a decoder.
- `webhttpkit.jwt_data`: JSON Web Token headers and payloads
  (`JSONWebTokenData`, `JSONWebTokenHeader`, `JSONWebSignatureHeader`,
  `JSONWebTokenPayload`, `Algorithm`). They can be rendered as JSON text or as
  unpadded base64url.
- `webhttpkit.file_route`: `FileSystemRouteSettings` and `FileSystemRoute`.
  - `resolve_request_path()` maps a URI to a file inside the document root. It
    raises `RouteError` with status 500 or 404.
  - `media_type_for()` guesses a media type from the file extension.
  - `error_page_for()` finds a `<status>.html` page in the document root.

## What it does not do

The package has no networking. It does not open connections, send requests or
read responses from a socket, and it has no running HTTP or WebSocket server.
The filters and routes only work on the request, response and context objects
you pass to them. The package has no proxy, cookie or credential store. It can
build the header and payload of a JSON Web Token but does not sign tokens. It
has no command-line program.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from webhttpkit.http_utils import NameValueCollection, make_query_string, split_and_url_decode

query = NameValueCollection()
query.add("q", "hello world")
query.add("page", "2")
text = make_query_string(query)        # "q=hello%20world&page=2"
decoded = split_and_url_decode(text)
print(decoded.get("q", ""))            # "hello world"
```

Following a redirect:

```python
from webhttpkit.messages import GetRequest, Response
from webhttpkit.processors import ClientContext, DefaultRedirectProcessor

context = ClientContext()
request = GetRequest("http://example.com/old")
response = Response(status=302)
response.headers.set("Location", "/new")

DefaultRedirectProcessor().response_filter(context, request, response)
print(request.uri)         # "http://example.com/new"
print(context.resubmit)    # True
```