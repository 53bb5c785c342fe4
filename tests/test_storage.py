import pytest

from archetype_ecs.serialization import DeserializationError, SerializationError, WorldData
from archetype_ecs.storage import (
    SerializationFormat,
    backup_save,
    delete_save,
    get_file_size,
    list_saves,
    load_world,
    save_world,
)


def test_save_and_load_json(tmp_path):
    path = tmp_path / "test_save.json"
    world = WorldData()
    world.add_metadata("test", "value")
    save_world(world, path, SerializationFormat.JSON)
    loaded = load_world(path, SerializationFormat.JSON)
    assert loaded.version == 1
    assert loaded.metadata.get("test") == "value"


def test_save_and_load_binary(tmp_path):
    path = tmp_path / "test_save.bin"
    world = WorldData()
    world.add_metadata("test", "binary")
    save_world(world, path, SerializationFormat.BINARY)
    loaded = load_world(path, SerializationFormat.BINARY)
    assert loaded.version == 1
    assert loaded.metadata.get("test") == "binary"


def test_file_size_matches_written_bytes(tmp_path):
    path = tmp_path / "save.json"
    world = WorldData(timestamp=10)
    save_world(world, path, SerializationFormat.JSON)
    assert get_file_size(path) == len(world.to_json_bytes())


def test_list_saves_creates_directory(tmp_path):
    folder = tmp_path / "saves"
    assert list_saves(folder) == []
    assert folder.is_dir()
    (folder / "b.json").write_text("{}")
    (folder / "a.bin").write_bytes(b"")
    (folder / "sub").mkdir()
    assert list_saves(folder) == ["a.bin", "b.json"]


def test_backup_and_delete(tmp_path):
    source = tmp_path / "save.json"
    backup = tmp_path / "save.bak"
    save_world(WorldData(), source, SerializationFormat.JSON)
    backup_save(source, backup)
    assert backup.read_bytes() == source.read_bytes()
    delete_save(source)
    assert not source.exists()


def test_missing_files_raise(tmp_path):
    missing = tmp_path / "missing.json"
    with pytest.raises(DeserializationError):
        load_world(missing, SerializationFormat.JSON)
    with pytest.raises(SerializationError):
        get_file_size(missing)
    with pytest.raises(SerializationError):
        delete_save(missing)
    with pytest.raises(SerializationError):
        backup_save(missing, tmp_path / "copy.json")