import math
import numbers
from typing import Optional

from .config import GraphConfig
from .model import Layout, Partition


class InvalidConfiguration(ValueError):
    def __init__(self, field: str, message: str):
        super().__init__(f'{field}: {message}')
        self.field = field


def _require_int(config: GraphConfig, name: str, minimum: int) -> int:
    value = getattr(config, name)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfiguration(name, f'must be an integer (got {value!r})')
    if value < minimum:
        raise InvalidConfiguration(name, f'must be >= {minimum} (got {value})')
    return int(value)


def _require_positive(config: GraphConfig, name: str) -> None:
    value = getattr(config, name)
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidConfiguration(name, f'must be a number (got {value!r})')
    if not (math.isfinite(value) and value > 0):
        raise InvalidConfiguration(name, f'must be a finite number > 0 (got {value})')


def _require_bool(config: GraphConfig, name: str) -> None:
    value = getattr(config, name)
    if not isinstance(value, bool):
        raise InvalidConfiguration(name, f'must be true or false (got {value!r})')


def _require_enum(config: GraphConfig, name: str, enum_cls) -> None:
    value = getattr(config, name)
    try:
        enum_cls(value)
    except ValueError:
        choices = '|'.join(member.value for member in enum_cls)
        raise InvalidConfiguration(name, f'must be {choices} (got {value!r})') from None


def max_order(config: GraphConfig) -> Optional[int]:
    """Return the candidate pool size when it is known before generation, else ``None``."""

    if config.part_count != 1:
        return None
    n = int(config.total_size)
    return n * (n - 1) // 2


def validate_config(config: GraphConfig) -> None:
    size = _require_int(config, 'total_size', 1)
    parts = _require_int(config, 'part_count', 1)
    if parts > size:
        raise InvalidConfiguration('part_count', f'must not exceed total_size ({parts} > {size})')

    _require_positive(config, 'canvas_width')
    _require_positive(config, 'canvas_height')
    _require_enum(config, 'layout', Layout)
    _require_enum(config, 'partition', Partition)

    for flag in ('directed', 'complete', 'near'):
        _require_bool(config, flag)

    min_degree = _require_int(config, 'min_degree', 0)
    if min_degree > 1:
        raise InvalidConfiguration('min_degree', f'must be 0 or 1 (got {min_degree})')

    if config.complete or config.near:
        return

    _require_int(config, 'order', 1)
    limit = max_order(config)
    if limit == 0:
        raise InvalidConfiguration('order', f'must be in [1, {limit}] but no candidate edges exist')
