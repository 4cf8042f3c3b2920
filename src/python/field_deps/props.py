# Typed property system for engine configuration

from typing import Any, TypeVar
import logging

T = TypeVar("T", bound="PropertyGroup")
LOG = logging.getLogger(__name__)


class Property:
    """Base class for typed configuration properties.

    Implements the descriptor protocol for seamless attribute access on PropertyGroup.
    """

    def __init__(
        self,
        default: Any = None,
        name: str = "",
        description: str = "",
    ):
        self.default = default
        self.name = name
        self.description = description
        self._attr_name: str = ""

    def __set_name__(self, owner: type, name: str) -> None:
        """Called when the descriptor is assigned to a class attribute."""
        self._attr_name = name

    def __get__(self, obj: Any, objtype: type = None) -> Any:
        """Get the property value from the instance."""
        if obj is None:
            return self
        if not hasattr(obj, "_property_values"):
            return self.default
        return obj._property_values.get(self._attr_name, self.default)

    def __set__(self, obj: Any, value: Any) -> None:
        """Set the property value on the instance."""
        if not hasattr(obj, "_property_values"):
            object.__setattr__(obj, "_property_values", {})
        obj._property_values[self._attr_name] = self.validate(value)

    def validate(self, value: Any) -> Any:
        """Validate and potentially coerce value. Override in subclasses."""
        return value


class IntProperty(Property):
    """Integer property with optional min/max bounds."""

    def __init__(
        self,
        default: int = 0,
        min: int = -(2**31),
        max: int = 2**31 - 1,
        **kw,
    ):
        super().__init__(default, **kw)
        self.min = min
        self.max = max

    def validate(self, value: Any) -> int:
        v = int(value)
        return max(self.min, min(self.max, v))


class BoolProperty(Property):
    """Boolean property."""

    def __init__(self, default: bool = False, **kw):
        super().__init__(default, **kw)

    def validate(self, value: Any) -> bool:
        return bool(value)


class StringProperty(Property):
    """String property with optional max length."""

    def __init__(self, default: str = "", maxlen: int = 0, **kw):
        super().__init__(default, **kw)
        self.maxlen = maxlen

    def validate(self, value: Any) -> str:
        s = str(value)
        if self.maxlen > 0:
            s = s[: self.maxlen]
        return s


class PropertyGroup:
    """Base class for structured settings.

    Properties are defined as class attributes using Property subclasses.
    Keyword arguments passed to the constructor override the defaults and
    go through the same validation as attribute assignment.

    Example:
        class CascadeSettings(PropertyGroup):
            depth = IntProperty(default=64, min=1)
            strict = BoolProperty(default=True)

        settings = CascadeSettings(depth=8)
    """

    _property_values: dict

    def __init__(self, **overrides: Any) -> None:
        self._property_values = {}
        self._init_properties()
        props = self._get_property_descriptors()
        for name, value in overrides.items():
            if name not in props:
                raise AttributeError(f"'{type(self).__name__}' has no property '{name}'")
            setattr(self, name, value)

    def _init_properties(self) -> None:
        """Initialize property values from class-level Property descriptors."""
        for name, prop in self._get_property_descriptors().items():
            self._property_values[name] = prop.default

    @classmethod
    def _get_property_descriptors(cls) -> dict[str, Property]:
        """Get all Property descriptors defined on this class."""
        result = {}
        for klass in cls.__mro__:
            if klass is PropertyGroup or klass is object:
                continue
            for name, value in vars(klass).items():
                if isinstance(value, Property) and name not in result:
                    result[name] = value
        return result

    def get_all_properties(self) -> dict[str, Property]:
        """Get all class-level properties."""
        return self._get_property_descriptors()

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return

        props = self._get_property_descriptors()
        if name not in props:
            raise AttributeError(f"'{type(self).__name__}' has no property '{name}'")
        self._property_values[name] = props[name].validate(value)
        LOG.debug("%s.%s = %r", type(self).__name__, name, self._property_values[name])

    def as_dict(self) -> dict[str, Any]:
        """Return a copy of the current values."""
        return dict(self._property_values)

    def copy(self: T) -> T:
        """Return an independent group with the same values."""
        return type(self)(**self._property_values)

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={v!r}" for k, v in self._property_values.items())
        return f"{type(self).__name__}({values})"
