"""
Benchmark suite for jsonstack parsing performance.

Compares jsonstack against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed, serialization speed, memory usage, and how parse
time grows with nesting depth.
"""
