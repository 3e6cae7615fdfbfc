# gopl

A collection of small, self-contained programs and libraries for learning:
line counting and de-duplication, echo variants, bit counting, number
formatting, slices and trees, palindromes, value display and deep equality,
bzip2 compression, small HTTP servers, and image generators (Lissajous GIFs
and Mandelbrot PNGs).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

Each program is installed as a command:

| Command            | What it does                                                   |
|--------------------|----------------------------------------------------------------|
| `gopl-dup1`        | prints the count and text of each repeated line of standard input |
| `gopl-dup2`        | prints the name of each named file that has a repeated line    |
| `gopl-dup3`        | prints the count and text of lines repeated across the named files |
| `gopl-echo`        | prints its arguments (`-n` omits the newline, `-s` sets the separator) |
| `gopl-hello`       | prints a greeting; `--platform` prints the host OS and architecture |
| `gopl-popcount`    | compares population-count implementations and their timings    |
| `gopl-basename`    | reads paths from standard input and prints their base names    |
| `gopl-comma`       | inserts thousands separators into its arguments                |
| `gopl-netflag`     | demonstrates an integer used as a bit field                    |
| `gopl-slices`      | reverses slices, then reverses each line of integers on standard input |
| `gopl-charcount`   | counts Unicode characters and UTF-8 lengths on standard input  |
| `gopl-dedup`       | prints each distinct input line once                           |
| `gopl-graph`       | demonstrates a directed graph                                  |
| `gopl-embed`       | demonstrates nested record types                               |
| `gopl-movie`       | prints a list of movies as JSON                                |
| `gopl-sha256`      | compares the SHA-256 digests of `x` and `X`                    |
| `gopl-autoescape`  | shows automatic HTML escaping in templates                     |
| `gopl-lissajous`   | writes an animated Lissajous GIF to standard output; with `web`, serves it on localhost:8000 |
| `gopl-mandelbrot`  | writes a Mandelbrot PNG to standard output                     |
| `gopl-jpeg`        | converts a PNG or JPEG on standard input to JPEG on standard output |
| `gopl-server`      | runs a small HTTP server: `server1`, `server2` or `server3`    |
| `gopl-bzipper`     | bzip2-compresses standard input to standard output             |

`gopl-server` takes `--host` (default `localhost`) and `--port` (default
`8000`). `server1` echoes the request path; `server2` also counts requests
and reports the count at `/count`; `server3` describes each request (method,
headers, host, peer address and form values) and serves a Lissajous GIF at
`/lissajous`, taking `cycles` and `nframes` query parameters.

Examples:

```
gopl-echo -s , a b c
gopl-comma 1 12 123 1234 1234567890
gopl-mandelbrot > mandelbrot.png
gopl-mandelbrot | gopl-jpeg > mandelbrot.jpg
gopl-bzipper < input.txt > input.txt.bz2
gopl-server server2 --port 8000
```

## Library use

```python
from gopl.word import is_palindrome
from gopl.numfmt import comma
from gopl.equal import equal
from gopl.treesort import sort
from gopl.display import display_lines

is_palindrome("A man, a plan, a canal: Panama")   # True
comma("1234567")                                   # "1,234,567"
equal([1, 2, 3], [1, 2, 3])                        # True

values = [5, 2, 9, 1]
sort(values)                                       # values is now [1, 2, 5, 9]

display_lines("x", [1, None])
# ['Display x (list):', 'x[0] = 1', 'x[1] = nil']
```

`gopl.equal.equal` compares values deeply, treats values of different types
as unequal and copes with cyclic structures.

`gopl.bzip.Writer` wraps a binary stream: call `write` with bytes and
`close` to finish the compressed stream without closing the underlying one.
It can also be used as a context manager.

## What is not included

The package has no temperature conversion command, no URL fetching, no
issue-tracker search or reports, no SVG surface server, no query-parameter
unpacking or search endpoint, no method listing, and no S-expression
encoding or pretty printing.