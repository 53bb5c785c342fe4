# archetype_ecs

Building blocks for an entity component system:

- **Systems and scheduling** (`archetype_ecs.system`, `archetype_ecs.schedule`):
  `System`, `SystemAccess` and `Schedule` order systems by their component reads and
  writes and group non-conflicting systems into stages.
- **Serialization** (`archetype_ecs.serialization`, `archetype_ecs.serializable`,
  `archetype_ecs.storage`): `WorldData`, `EntityData` and `EntityIdData` save world
  snapshots as pretty JSON or compact binary (msgpack). The storage functions write,
  read, list, back up and delete save files.
- **Timing** (`archetype_ecs.time`): `Time` tracks frame delta, elapsed time and time
  scale. `FixedTime` turns variable frame times into a count of fixed steps. All
  durations are in seconds.
- **Transforms** (`archetype_ecs.transform`): `Vec3`, `Quat`, `LocalTransform` and
  `GlobalTransform`.
- **Reflection** (`archetype_ecs.reflection`): the `Reflect` mixin, `ReflectValue`
  and `TypeRegistry`.
- **Resources** (`archetype_ecs.resources`): `ResourceManager`, `MemoryPool`, `Handle`,
  `GenerationTracker`, the `TextureResource`, `AudioResource` and `DataResource` types,
  and file helpers in `archetype_ecs.resources.loader`.
- **Utilities** (`archetype_ecs.utils`): `next_id()` and `align_to(value, alignment)`.

## Installation

```
pip install .
```

## Scheduling systems

```python
from archetype_ecs.system import System, SystemAccess
from archetype_ecs.schedule import Schedule


class Movement(System):
    def access(self):
        return SystemAccess(reads=["Velocity"], writes=["Position"])

    def name(self):
        return "movement"

    def run(self, world):
        ...


schedule = Schedule().with_system(Movement()).build()
print(schedule.stage_count())
for stage in schedule.stage_plan():
    for system_id in stage:
        schedule.system_by_id(system_id).run(world=None)
```

Two systems conflict when both write the same component, or when one writes what the
other reads. Conflicting systems keep the order they were added in and land in
separate stages. `SystemGraph.topological_sort` raises `SystemCycleError` if the graph
holds a cycle.

## Saving a world

```python
from archetype_ecs.serialization import WorldData
from archetype_ecs.serializable import build_entity_data
from archetype_ecs.storage import SerializationFormat, save_world, load_world

world = WorldData()
world.add_metadata("level", "1")
world.add_entity(build_entity_data(42, 1, [("Health", {"hp": 100.0, "max_hp": 100.0})]))

save_world(world, "save.json", SerializationFormat.JSON)
loaded = load_world("save.json", SerializationFormat.JSON)
```

Failures to write raise `SerializationError`. Failures to read or decode raise
`DeserializationError`. `list_saves(directory)` creates the directory if it is missing
and returns the sorted names of the files in it.

## Fixed timestep

```python
from archetype_ecs.time import Time, FixedTime

time = Time()
fixed = FixedTime(60)

time.update()
for _ in range(fixed.tick(time.delta)):
    ...  # physics at 60 Hz
```

## Resources

```python
from archetype_ecs.resources.manager import ResourceManager
from archetype_ecs.resources.asset_types import DataResource

manager = ResourceManager(1024 * 1024)
handle = manager.load("level.bin", DataResource("level.bin", bytes(100)))
resource = manager.get("level.bin")
manager.unload("level.bin")
```

Two operations raise errors:

- Loading past the manager's capacity raises `ResourceMemoryOverflowError`.
- Unloading an unknown path raises `ResourceNotFoundError`.

`manager.stats` returns a snapshot of the hit, miss and memory counters.

## What this package does not do

- There is no world, entity storage or component query engine. `System.run` receives
  whatever world object you pass it.
- A `Schedule` computes stages but does not run them. Run them yourself with
  `stage_plan()` and `system_by_id()`.
- Constraints recorded by `add_system_before` and `add_system_after` are kept in
  `ordering_constraints`, but the stage building does not use them.
- The `reload()` methods of the resource types reread nothing from disk.

## Running the tests

```
pip install .[test]
pytest
```