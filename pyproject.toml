[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latencykit"
version = "0.1.0"
description = "Low-latency building blocks: an order book, caches, ring buffers, pools, a thread pool, a rate limiter and small benchmarks"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = [
    "order-book",
    "matching-engine",
    "ring-buffer",
    "lru-cache",
    "hash-table",
    "thread-pool",
    "rate-limiter",
    "object-pool",
    "event-loop",
    "benchmark",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
latencykit-particles = "latencykit.particles:main"
latencykit-hotloop = "latencykit.hotloop:main"
latencykit-echo = "latencykit.echo_server:main"
latencykit-showcase = "latencykit.showcase:main"
latencykit-batch-ring = "latencykit.batch_ring:main"

[tool.hatch.build.targets.wheel]
packages = ["latencykit"]

[tool.hatch.build.targets.sdist]
include = [
    "latencykit",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
