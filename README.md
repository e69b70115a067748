# dtl

Entity values with transit-style JSON encoding, plus a small set of data
transformation functions for building target entities from a source entity.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra with `pip install .[test]`, then run `pytest`.

## Transit-encoded values (`dtl.types`, `dtl.entity`)

Strings that start with `~` carry a type tag:

| Prefix | Python value                 | Example                                   |
|--------|------------------------------|-------------------------------------------|
| `~r`   | `dtl.types.URI`              | `"~rhttp://example.com/"`                 |
| `~t`   | `datetime.date` (no `T`)     | `"~t2020-01-01"`                          |
| `~t`   | `datetime.datetime` (with `T`) | `"~t2014-07-08T09:10:11.000000000+0000"` |
| `~u`   | `dtl.types.UUID`             | `"~u123"`                                 |
| `~b`   | `bytes`, standard base64     | `"~b/w=="`                                |
| `~:`   | `dtl.types.NI`               | `"~:foo:bar"`                             |
| `~f`   | `decimal.Decimal`            | `"~f123.456"`                             |

A string that starts with `~` but has none of these tags is kept as a plain
string.

```python
from dtl.entity import dumps, loads
from dtl.types import NI, URI

value = {"uri": URI("http://example.com/"), "ni": NI("foo", "bar")}
text = dumps(value)
assert loads(text) == value
```

`dtl.entity` provides:

- `encode(value)` and `decode(value)`, which convert between entity values and
  plain JSON-compatible data, recursing into lists and dicts. Non-finite floats
  become `None`; dict keys must be strings.
- `dumps(value)` and `loads(text)`, which do the same through compact JSON
  text. `NaN` and `Infinity` in the input are rejected.
- `decode_string(text)` for a single string.
- `Entity`, a dataclass with the metadata fields `_id`, `_deleted`, `_ts`,
  `_filtered`, `_updated`, `_hash` and the optional `_previous`, and the rest
  of the properties in `content`. `Entity.to_dict()` flattens content next to
  the metadata; `Entity.from_dict(data)` checks the metadata types and decodes
  the content.

`dtl.types` holds the value classes (`URI`, `UUID`, `NI`) with `encode()` and
`decode(text)`, and the functions `encode_bytes`/`decode_bytes`,
`parse_date`/`encode_date`/`decode_date`,
`parse_datetime`/`encode_datetime`/`decode_datetime` and
`parse_decimal`/`encode_decimal`/`decode_decimal`.

Some details of the formats:

- Date-times are parsed from `YYYY-MM-DDTHH:MM:SS.fff+HHMM` (the fraction and
  the offset are required, the offset may also be `+HH:MM`) and converted to
  UTC. They are always written in UTC with nine fraction digits and `+0000`;
  naive datetimes are taken as UTC.
- Decimals must be finite and are written in plain notation, without an
  exponent.
- An `NI` is split at the last `:`.

Malformed tagged strings raise `dtl.types.TransitError`, a subclass of
`ValueError`.

## Transformation functions (`dtl.functions`)

- `Target` collects properties (`add`) and extra entities (`create`; a list
  adds each item). `filter()` drops the target itself, and `output()` returns
  the created entities followed by the target unless it was filtered.
- `lower`, `upper` work on a string or on the strings of a list (other items
  are dropped); `concat` joins the strings of a list, skipping anything else.
- `list_literal`, `null_literal`, `number_literal` and `string_literal` build literals.
- `apply(function, items)` runs a transform on each list item and flattens
  its output; `map_items(function, items)` maps over a list and returns
  `None` for anything that is not a list; `path(arg, value)` follows a name or
  a list of names into nested dicts and returns `None` when a step is missing.

```python
from dtl.functions import Target, concat, list_literal, lower, path, string_literal

source = {"x": {"y": "D"}}
target = Target()
target.add("hello", concat(list_literal([
    string_literal("wor"),
    string_literal("l"),
    lower(path(list_literal(["x", "y"]), source)),
])))
assert target.output() == [{"hello": "world"}]
```

`dtl.examples` contains complete transforms built this way: `hello_world`,
`create_foo` and `map_upper`.

## What the package does not do

Transforms are written as Python function calls. There is no parser or
evaluator for transforms given as JSON expressions, and there is no
command-line tool.