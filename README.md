# latencykit

Small building blocks that come up in latency-sensitive systems — a
matching order book, caches, rings, object pools, a thread pool, a rate
limiter, a readiness loop and a non-blocking echo server — plus a few
benchmarks that show how data layout and loop shape affect throughput.

## What is inside

| Module | Contents |
| --- | --- |
| `latencykit.order_book` | `Side`, `Order`, `Fill`, `OrderBook`: a price-time priority limit order book |
| `latencykit.caches` | `LRUCache` and `OpenAddressingHashTable` (linear probing, doubles when half full) |
| `latencykit.batch_ring` | `SPSCRing` with `push_batch` / `pop_batch`; `run_single_ring_bump`, `run_double_ring_fixed`, `measure`, `main` |
| `latencykit.thread_pool` | `ThreadPool` whose `submit` returns a `concurrent.futures.Future` |
| `latencykit.stack` | `ConcurrentStack`, a thread-safe LIFO stack |
| `latencykit.pools` | `FixedSizePool`, `PoolAllocator`, `SlabSlotPool` |
| `latencykit.rate_limiter` | `TokenBucket` with an injectable clock |
| `latencykit.event_loop` | `EventLoop`: register descriptors and run read callbacks when ready |
| `latencykit.echo_server` | `EchoServer`: a single-threaded non-blocking TCP echo server |
| `latencykit.smart_container` | `SmartContainer`: a growable array that tracks its capacity |
| `latencykit.cursor` | `Cursor`: a random-access position inside a sequence |
| `latencykit.particles` | `Particle`, `ParticleSystem`, array-of-objects vs parallel-arrays integration, `run_benchmark` |
| `latencykit.hotloop` | `sum_naive`, `sum_cache_friendly` (both wrap to 64 bits) |
| `latencykit.chains` | `divide`, `multiply`, `validate_positive`, `ChainError`, `byteswap32`, `float_bits` |
| `latencykit.showcase` | `FileGuard`, `Shape` / `Circle` / `Rectangle` / `Triangle`, the `Device` / `Wireless` / `Sensor` / `SmartSensor` diamond, `EventBus`, `Subscriber`, `parse_int`, `header` |

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

An order book; `best_bid()` and `best_ask()` return 0 when that side is empty:

```python
from latencykit.order_book import Order, OrderBook, Side

book = OrderBook()
book.add_order(Order(1, Side.SELL, 100, 50))   # [] — rests on the ask side
book.add_order(Order(2, Side.BUY, 100, 30))
# [Fill(order_id=2, match_id=1, price=100, qty=30)]
book.best_ask()                                # 100, with 20 left
book.add_order(Order(3, Side.BUY, 99, 100))
book.best_bid()                                # 99
```

An LRU cache; `get` returns `None` on a miss:

```python
from latencykit.caches import LRUCache

cache = LRUCache(3)
cache.put(1, "one")
cache.put(2, "two")
cache.put(3, "three")
cache.get(1)          # "one"; key 1 is now the most recently used
cache.put(4, "four")  # evicts key 2
cache.get(2)          # None
```

A thread pool:

```python
from latencykit.thread_pool import ThreadPool

with ThreadPool(4) as pool:
    futures = [pool.submit(lambda i: i * i, i) for i in range(8)]
    print([f.result() for f in futures])
```

After `shutdown()` (or leaving the `with` block), `submit` raises `RuntimeError`.

A growable container with cursors:

```python
from latencykit.smart_container import SmartContainer

c = SmartContainer([3, 1, 4])
c.push_back(1)          # capacity doubles from 3 to 6
c.capacity()            # 6
c.shrink_to_fit()       # capacity is now 4
c.end() - c.begin()     # 4
c.at(10)                # raises IndexError
```

Steps that fail by raising:

```python
from latencykit.chains import ChainError, divide, multiply, validate_positive

validate_positive(multiply(divide(20, 2), 3)) + 1   # 31
divide(10, 0)                                       # raises ChainError("division by zero")
```

## Commands

```
latencykit-particles   [--count N] [--physics-steps N] [--render-steps N] [--dt DT]
latencykit-hotloop     [--count N]
latencykit-echo        [--host HOST] [--port PORT] [--duration SECONDS]
latencykit-showcase    [--output PATH]
latencykit-batch-ring  [--duration SECONDS]
```

- `latencykit-particles` times the same physics and render workload on a list
  of `Particle` objects and on a `ParticleSystem` of parallel lists.
- `latencykit-hotloop` times both summing functions over `range(count)`.
- `latencykit-echo` listens (port 8888 by default), echoes what clients send and
  exits once no clients are connected and `--duration` seconds have passed.
- `latencykit-showcase` walks through `FileGuard`, `parse_int`, the shapes,
  the device diamond and the event bus, printing as it goes.
- `latencykit-batch-ring` runs both buffer-recycling schemes, single and batched,
  for `--duration` seconds each and prints their throughput.

## What it does not do

- There are no blocking producer/consumer queues, no reader-writer lock, no
  timer wheel, no background logger and no market-data message queue here.
- `EchoServer` is a plain echo loop: one thread, no protocol, no TLS, and it
  accepts at most one new client per `poll_once()`.
- `EventLoop` watches for readability only.
- The benchmarks measure Python code; their numbers show relative shape,
  not the speed of hand-tuned native code.