import json

import pytest

from ropesim.errors import PresetError
from ropesim.presets import PRESETS, build_cloth, load_preset
from ropesim.serialization import load_world, save_world


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_presets_build_consistent_graphs(world, name):
    load_preset(world, name)
    assert len(world.points) > 1
    assert len(world.constraints) > 0
    assert any(p.locked for p in world.points)
    for c in world.constraints:
        assert c.a in world.points and c.b in world.points
        assert c.rest_length > 0


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_presets_survive_a_few_steps(world, name):
    world.set_relaxation_passes(20)
    load_preset(world, name)
    for _ in range(30):
        world.step(16)
    assert world.is_finite()


def test_load_preset_replaces_world(world):
    world.points.add((1, 1))
    load_preset(world, 'rope')
    assert all(p.pos.y == 80 for p in world.points)


def test_unknown_preset(world):
    with pytest.raises(PresetError):
        load_preset(world, 'trampoline')


def test_cloth_grid_shape(world):
    grid = build_cloth(world, segments_x=3, segments_y=2, pin_corners=('top_row',), shear=True)
    assert len(grid) == 3 and all(len(row) == 4 for row in grid)
    assert all(world.points.get(h).locked for h in grid[0])
    assert not world.points.get(grid[2][0]).locked
    # 3*3 + 4*2 structural, 2 * 3*2 shear
    assert len(world.constraints) == 17 + 12


def test_save_and_load_round_trip(world, tmp_path):
    load_preset(world, 'pendulum')
    world.set_relaxation_passes(40)
    for _ in range(5):
        world.step(16)
    path = tmp_path / "world.json"
    save_world(world, str(path))

    loaded = load_world(str(path))
    assert loaded.config.relaxation_passes == 40
    assert [p.pos.as_tuple() for p in loaded.points] == [p.pos.as_tuple() for p in world.points]
    assert [p.prev_pos.as_tuple() for p in loaded.points] == [p.prev_pos.as_tuple() for p in world.points]
    assert [p.locked for p in loaded.points] == [p.locked for p in world.points]
    assert [c.rest_length for c in loaded.constraints] == [c.rest_length for c in world.constraints]


def test_load_rejects_bad_documents(tmp_path):
    garbage = tmp_path / "garbage.json"
    garbage.write_text("{not json")
    with pytest.raises(PresetError):
        load_world(str(garbage))

    dangling = tmp_path / "dangling.json"
    dangling.write_text(json.dumps({
        'points': [{'pos': {'__class__': 'Vec2', 'x': 0, 'y': 0}, 'locked': False}],
        'constraints': [{'a': 0, 'b': 3, 'rest_length': 1.0}],
    }))
    with pytest.raises(PresetError):
        load_world(str(dangling))


def _vec(x, y):
    return {'__class__': 'Vec2', 'x': x, 'y': y}


def _two_point_document(**constraint):
    link = {'a': 0, 'b': 1, 'rest_length': 10.0}
    link.update(constraint)
    return {
        'points': [{'pos': _vec(0, 0), 'locked': True}, {'pos': _vec(10, 0), 'locked': False}],
        'constraints': [link],
    }


def _write(tmp_path, document, name="world.json"):
    path = tmp_path / name
    path.write_text(json.dumps(document))
    return str(path)


def test_well_formed_two_point_document_loads(tmp_path):
    loaded = load_world(_write(tmp_path, _two_point_document()))
    assert len(loaded.points) == 2
    assert len(loaded.constraints) == 1


@pytest.mark.parametrize("rest_length", ["abc", None, -1.0, float('nan'), float('inf')])
def test_load_rejects_bad_rest_lengths(tmp_path, rest_length):
    with pytest.raises(PresetError):
        load_world(_write(tmp_path, _two_point_document(rest_length=rest_length)))


@pytest.mark.parametrize("index", [-1, 2, 1.0, "1", True, None])
def test_load_rejects_bad_endpoint_indices(tmp_path, index):
    with pytest.raises(PresetError):
        load_world(_write(tmp_path, _two_point_document(b=index)))


@pytest.mark.parametrize("document", [[], "world", 3, None])
def test_load_rejects_non_object_documents(tmp_path, document):
    with pytest.raises(PresetError):
        load_world(_write(tmp_path, document))


def test_load_rejects_malformed_config(tmp_path):
    document = _two_point_document()
    document['config'] = ['not', 'a', 'mapping']
    with pytest.raises(PresetError):
        load_world(_write(tmp_path, document))


@pytest.mark.parametrize("field", ["pos", "prev_pos"])
def test_load_rejects_non_finite_coordinates(tmp_path, field):
    document = _two_point_document()
    document['points'][1][field] = _vec(float('nan'), 0)
    with pytest.raises(PresetError):
        load_world(_write(tmp_path, document))


def test_load_rejects_binary_files(tmp_path):
    path = tmp_path / "world.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(PresetError):
        load_world(str(path))
