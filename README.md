# embedkit

Small, dependency-free helpers for the kind of work that comes up around
embedded firmware: bit and digit arithmetic, IEEE-754 byte conversion,
Modbus CRC-16, NMEA sentence field extraction, fixed-capacity buffers and
containers, plain-text record storage, and a small Unix-domain-socket
service that sums integers.

Requires Python 3.10 or later.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `embedkit.numeric`: `dec_to_bin`, `bin_to_dec`, `factorial`,
  `factorial_recursive`, `lcm`, `hcf`, `num_of_digits`, `reverse_digits`,
  `sum_of_digits`, `is_palindrome`, `count_set_bits` (low 32 bits),
  `set_bit` (32-bit value, positions 0 to 31), `simple_interest` and
  `top_two`.
- `embedkit.floatcodec`: `float_to_hex` (the 32-bit pattern of a single
  precision float), `hex_to_float` (first four bytes, big-endian) and
  `hex_string` (upper-case hex text).
- `embedkit.crc`: `crc16`, the Modbus RTU CRC-16; its low byte goes first
  on the wire.
- `embedkit.textutils`: `reverse_string` and `reverse_words`.
- `embedkit.nmea`: `parse_gga` and `parse_rmc`, which return the frozen
  dataclasses `GgaFix` and `RmcFix`. Fields are kept as text; empty
  fields become `None`, and the time is cut to its first six digits. The
  last field, which carries the checksum, is not read and the checksum is
  not checked. A sentence of the wrong type raises `ValueError`.
- `embedkit.buffers`: `RingBuffer` (integers, 8 slots by default) and
  `MessageQueue` (up to 10 messages of at most 128 bytes by default; text
  is stored as UTF-8). Both raise `BufferFullError` and
  `BufferEmptyError`.
- `embedkit.sorting`: `bubble_sort`, `insertion_sort`, `selection_sort`
  (each returns a new list), `binary_search` (returns an index or `None`)
  and `transpose`.
- `embedkit.arrays`: `BoundedArray`, a list of integers with a fixed
  capacity (10 by default) that raises `OverflowError` when full and
  `IndexError` on a bad index; plus `recursive_binary_search`, `merge`,
  `union` and `intersection` over ascending sequences.
- `embedkit.stack`: `BoundedStack` (capacity 5 by default), which raises
  `StackOverflowError` and `StackUnderflowError`.
- `embedkit.linkedlist`: `LinkedList`, a singly linked list of integers
  with `append`, `prepend`, `insert` (0-based position), `sorted_insert`,
  `delete` (1-based position), `sum`, `max`, `search`,
  `move_to_front_search`, `is_sorted` and `remove_duplicates`.
- `embedkit.records`: the `Student` dataclass with `write_students` and
  `read_students`, which store each field on its own line of a text file.
- `embedkit.sumserver`: `SumServer`, `send_numbers`, `encode_number`,
  `decode_number` and the `main` entry point of the `embedkit-sum`
  command.

## Examples

```python
from embedkit.crc import crc16
from embedkit.floatcodec import hex_to_float
from embedkit.nmea import parse_rmc

print(hex(crc16(b"\x01\x03\x00\x00\x00\x01")))
print(hex_to_float(bytes([0x42, 0xF7, 0x00, 0x00])))   # 123.5

fix = parse_rmc("$GPRMC,144326.00,A,5107.0017737,N,11402.3291611,W,"
                "0.080,323.3,210307,0.0,E,A*20")
print(fix.date)       # 210307
print(fix.time)       # 144326
```

```python
from embedkit.buffers import RingBuffer, BufferEmptyError

ring = RingBuffer(capacity=4)
ring.write(1)
ring.write(2)
print(ring.read())    # 1
```

## The summing service

The service listens on a Unix-domain stream socket (`/tmp/DemoSock1` by
default) and serves several clients at once. A client sends four-byte
signed integers in host byte order; a zero ends the session, and the
server replies `result : <sum>`, padded with NUL bytes to 128 bytes, then
closes the connection.

Run the server:

```
embedkit-sum serve
embedkit-sum serve --path /tmp/other.sock
```

Send numbers and print their sum:

```
embedkit-sum send 4 5 6
```

From Python:

```python
from embedkit.sumserver import SumServer, send_numbers

total = send_numbers("/tmp/DemoSock1", [4, 5, 6])   # 15
```

`SumServer` can be used as a context manager; `serve_forever` runs until
`shutdown` is called, and `close` removes the socket file.
`send_numbers` stops at the first zero and adds one if there is none.

## What it does not do

- The summing service speaks only over Unix-domain sockets; there is no
  TCP transport, no authentication and no persistence of totals.
- Record storage is plain text only: names and branches must be single
  words without whitespace, and there is no other file format.
- NMEA support covers field extraction from GGA and RMC sentences only;
  no checksum validation, no coordinate conversion and no serial-port
  reading.