from __future__ import annotations

# NOTE: The registries are process-global and never reclaimed. If threading is
# introduced, get_or_create needs a lock around the check-then-insert.


class Symbol:
    """Interned identifier: one instance per name, so `is` is equality."""

    __slots__ = ("name",)
    _registry: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        return cls.get_or_create(name)

    @classmethod
    def get_or_create(cls, name: str) -> Symbol:
        instance = cls._registry.get(name)
        if instance is None:
            instance = object.__new__(cls)
            instance.name = name
            cls._registry[name] = instance
        return instance

    @classmethod
    def is_interned(cls, name: str) -> bool:
        return name in cls._registry

    def __reduce__(self):
        return (type(self).get_or_create, (self.name,))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class Keyword:
    """Interned `:name` constant; evaluates to itself and may key a HashMap."""

    __slots__ = ("name",)
    _registry: dict[str, Keyword] = {}

    def __new__(cls, name: str) -> Keyword:
        return cls.get_or_create(name)

    @classmethod
    def get_or_create(cls, name: str) -> Keyword:
        instance = cls._registry.get(name)
        if instance is None:
            instance = object.__new__(cls)
            instance.name = name
            cls._registry[name] = instance
        return instance

    def __reduce__(self):
        return (type(self).get_or_create, (self.name,))

    def __repr__(self):
        return f"Keyword({self.name!r})"

    def __str__(self):
        return f":{self.name}"
