"""
seeded record fixtures for collection tests.

a schema is plain data: dicts become records whose fields may refer to the
fields built before them, a one-item list repeats its item, strings and
(method, kwargs) tuples call faker, and dicts carrying `_qen_provider` use
one of the built-in providers (ref, choice, sequence).
"""

from types import SimpleNamespace
import numpy as np
from faker import Faker
from swiss import Collection, create
from typing import Any, Callable, Dict, List, Optional

DEFAULT_REPEAT = 5


class Generator:
    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._issued = 0
        self._providers: Dict[str, Callable[[Dict, Dict], Any]] = {
            'ref': self._ref,
            'choice': self._choice,
            'sequence': self._sequence,
        }

    # --- providers ---

    def _ref(self, config: Dict, scope: Dict) -> Any:
        name = config['key']
        if name not in scope:
            raise ValueError(f"ref to '{name}' has nothing to point at yet")
        template = config.get('format')
        return template.format(scope[name]) if template else scope[name]

    def _choice(self, config: Dict, scope: Dict) -> Any:
        options = config['from']
        return options[int(self._rng.integers(len(options)))]

    def _sequence(self, config: Dict, scope: Dict) -> int:
        # one counter per generator, shared by every sequence field
        value = config.get('start', 1) + self._issued
        self._issued += 1
        return value

    # --- schema walking ---

    def _fake_value(self, name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{name}'")
        return method(**(kwargs or {}))

    def _repeat(self, item: Any) -> int:
        spec = item.get('_qen_count', DEFAULT_REPEAT) if isinstance(item, dict) else DEFAULT_REPEAT
        if isinstance(spec, int):
            return spec
        low, high = spec
        return int(self._rng.integers(low, high, endpoint=True))

    def _record(self, schema: Dict, scope: Dict) -> Dict[str, Any]:
        record: Dict[str, Any] = {}
        for field, field_schema in schema.items():
            record[field] = self.create(field_schema, {**scope, **record})
        return record

    def create(self, schema: Any, scope: Optional[Dict] = None) -> Any:
        scope = scope or {}
        if isinstance(schema, dict):
            name = schema.get('_qen_provider')
            if name is None:
                return self._record(schema, scope)
            if name not in self._providers:
                raise ValueError(f"unknown _qen_provider: '{name}'")
            return self._providers[name](schema, scope)
        if isinstance(schema, list):
            if not schema:
                return []
            item = schema[0]
            body = item.get('_qen_items', item) if isinstance(item, dict) else item
            return [self.create(body, scope) for _ in range(self._repeat(item))]
        if isinstance(schema, tuple):
            name, kwargs = schema
            return self._fake_value(name, kwargs)
        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._fake_value(schema)
        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def _records(self, count: int) -> List[Dict[str, Any]]:
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int) -> Collection:
        """a sequence of dict records"""
        return create(self._records(count))

    def take_objects(self, count: int) -> Collection:
        """the same records as simple namespaces"""
        return create([SimpleNamespace(**record) for record in self._records(count)])

    def take_mixed(self, count: int) -> Collection:
        """dict records at even positions, namespaces at odd ones"""
        return create([SimpleNamespace(**record) if i % 2 else record
                       for i, record in enumerate(self._records(count))])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
