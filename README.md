# lumicore

Building blocks for a node-based control application, usable on their own.

## Modules

- `lumicore.ring_storage.RingStorage` — a sequence with a fixed capacity.
  `append` on a full storage drops the first item, `prepend` drops the last,
  and `insert(index, value, count)` pushes the earliest items out. A storage
  with zero capacity ignores additions. It also offers `remove`, `pop_back`,
  `pop_front`, `fill`, `resize`, `set_capacity`, `squeeze`, `clear` and
  `to_list`, plus the `capacity`, `free_size`, `is_full` and `is_empty`
  properties.
- `lumicore.circular_buffer.CircularBuffer` — a `RingStorage` with `extend`,
  `first`, `last`, `starts_with`, `ends_with`, `value`, `index_of`,
  `last_index_of`, `count` and `in`. Buffers compare by content only
  (`==`, `<`, `<=`, `>`, `>=`); `a + b` gives a new buffer just large enough
  for both, and `+=` extends by a buffer, list or tuple or appends any other
  value.
- `lumicore.attributes` — named attributes that report changes through a
  `value_changed` signal: `DoubleAttribute` and `IntegerAttribute` (values
  clamped to `min`/`max`), `StringAttribute`, `BoolAttribute`,
  `StringListAttribute` and `VariantListAttribute`. An `ObjectWithAttributes`
  collects them by name (`attr`, `attribute`) and writes or reads the
  persistent ones to and from a state dict (`write_attributes_to`,
  `read_attributes_from`).
- `lumicore.events.Signal` — a list of callbacks with `connect`,
  `disconnect` and `emit`.
- `lumicore.utils` — `limit`, `limit_to_one`, `real_mod`, `int_mod`,
  `almost_median`, `string_to_double`, `append_unique`, `remove_unique`,
  `is_equal_insensitive`, binary string-list and CBOR-map encoding
  (`serialize_string_list`, `deserialize_string_list`, `serialize_cbor_map`,
  `deserialize_cbor_map`), `to_base64`/`from_base64`, and timing helpers
  (`now`, `diff`, `elapsed_sec_since`, `Stopwatch`).
- `lumicore.constants` — `VERSION_STRING`, `TRIGGER_THRESHOLD`,
  `BLOCK_UPDATE_FPS`, `DEFAULT_BACKGROUND_NAME` and the
  `GraphicalEffectsLevel` enum.
- `lumicore.async_websocket.AsyncWebSocket` — a WebSocket client whose
  `open`, `close` and `send_binary_message` only queue work for a background
  thread. Results arrive through the `connected`, `disconnected`,
  `binary_message_received` and `error` signals, emitted from background
  threads. Call `shutdown` to stop the worker.

## Installation

```
pip install .
```

## Example

```python
from lumicore.circular_buffer import CircularBuffer

buf = CircularBuffer(3)
buf.extend([1, 2, 3, 4])
print(buf.to_list())          # [2, 3, 4]
print(buf.first(), buf.last())  # 2 4
```

```python
from lumicore.attributes import ObjectWithAttributes, DoubleAttribute

owner = ObjectWithAttributes(None)
level = DoubleAttribute(owner, "level", 0.5, 0.0, 1.0)
level.value_changed.connect(lambda: print("changed"))

state = {}
owner.write_attributes_to(state)             # state == {"level": 0.5}
owner.read_attributes_from({"level": 2.0})   # clamped to 1.0, prints "changed"
```

## What it does not do

This is a library only: it has no command-line program, no graphical user
interface and no project storage of its own. Attributes are written to and
read from plain dicts; saving those to disk is left to the caller. Colour
attributes are not included.

## Tests

```
pip install .[test]
pytest
```