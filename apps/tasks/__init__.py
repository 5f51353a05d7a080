"""
Tasks app - in-memory task tracking.

Layers, leaf-first:
- store: concurrency-safe keyed container (TaskStore)
- repository: storage-agnostic interface over the store
- use_cases: one callable per business operation
- mappers: wire <-> domain translation and input validation
- api: ninja routes binding HTTP verbs to use cases
- container: composition root wiring the layers together
"""
