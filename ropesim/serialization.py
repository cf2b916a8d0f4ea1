import json
import logging
import math

from .MassPoint import MassPoint
from .Vec2 import Vec2
from .errors import DegenerateConstraint, DuplicateConstraint, PresetError
from .world import World

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class RopeEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, Vec2):
            return {'__class__': 'Vec2', 'x': obj.x, 'y': obj.y}
        if isinstance(obj, MassPoint):
            return {
                '__class__': 'MassPoint',
                'pos': obj.pos,
                'prev_pos': obj.prev_pos,
                'locked': obj.locked,
            }
        return super().default(obj)


def rope_decoder(dct):
    if dct.get('__class__') == 'Vec2':
        return Vec2(dct['x'], dct['y'])
    return dct


def world_to_dict(world):
    # handles are process-local; the file refers to points by list index instead
    index_of = {p.handle: i for i, p in enumerate(world.points)}
    return {
        'version': FORMAT_VERSION,
        'config': {
            'gravity': world.config.gravity,
            'relaxation_passes': world.config.relaxation_passes,
            'point_radius': world.config.point_radius,
        },
        'points': list(world.points),
        'constraints': [
            {'a': index_of[c.a], 'b': index_of[c.b], 'rest_length': c.rest_length}
            for c in world.constraints
        ],
    }


def save_world(world, filename):
    with open(filename, 'w') as f:
        json.dump(world_to_dict(world), f, cls=RopeEncoder, indent=4)
    logger.info("saved %d points / %d constraints to %s", len(world.points), len(world.constraints), filename)


def _point_index(value, count):
    # bool is an int subclass but never a valid index
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < count:
        raise PresetError(f"constraint endpoint {value!r} is not a point index in [0, {count})")
    return value


def populate_world(world, data):
    """Rebuild points and links from a decoded document through the store APIs."""
    if not isinstance(data, dict):
        raise PresetError(f"world document must be a JSON object, not {type(data).__name__}")
    try:
        handles = []
        for p_data in data['points']:
            h = world.points.add(p_data['pos'], locked=p_data.get('locked', False))
            world.points.get(h).prev_pos = Vec2.of(p_data.get('prev_pos', p_data['pos']))
            handles.append(h)
        for c_data in data['constraints']:
            a = _point_index(c_data['a'], len(handles))
            b = _point_index(c_data['b'], len(handles))
            c = world.constraints.add(handles[a], handles[b])
            # the points may have moved since the link was made
            c.rest_length = float(c_data['rest_length'])
            if not math.isfinite(c.rest_length) or c.rest_length < 0.0:
                raise PresetError(f"rest length {c.rest_length!r} is not a finite non-negative number")
    except (KeyError, IndexError, TypeError, ValueError, AttributeError,
            DuplicateConstraint, DegenerateConstraint) as exc:
        raise PresetError(f"malformed world document: {exc!r}") from exc
    if not world.is_finite():
        raise PresetError("world document has non-finite point coordinates")
    return world


def load_world(filename, config=None, **world_kwargs):
    with open(filename, 'r') as f:
        try:
            data = json.load(f, object_hook=rope_decoder)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise PresetError(f"{filename} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise PresetError(f"{filename} does not hold a world document")

    world = World(config=config, **world_kwargs)
    if config is None:
        try:
            saved = data.get('config', {})
            world.set_gravity(saved.get('gravity', world.config.gravity))
            world.set_relaxation_passes(saved.get('relaxation_passes', world.config.relaxation_passes))
            world.points.point_radius = float(saved.get('point_radius', world.config.point_radius))
        except (TypeError, ValueError, AttributeError) as exc:
            raise PresetError(f"malformed config in {filename}: {exc!r}") from exc
        world.config.point_radius = world.points.point_radius
    populate_world(world, data)
    logger.info("loaded %d points / %d constraints from %s", len(world.points), len(world.constraints), filename)
    return world
