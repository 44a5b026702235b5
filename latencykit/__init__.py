"""Order book, caches, rings, pools, a thread pool, a rate limiter, an echo server and small benchmarks."""

__version__ = "0.1.0"