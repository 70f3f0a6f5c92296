"""
Odity handling configuration.

An "odity" is a pattern in the source ontology that is legal but ambiguous
or confusing when translated to SHACL. Each odity kind can be handled
separately for the range and the domain axis of a property:

- IGNORE: say nothing, follow the silent default behaviour
- WARN: log a warning, record it in the conversion result and continue
- ERROR: abort the conversion

Usage:
    from owl2shacl.shared.models.config import ConverterConfig, OdityHandling

    config = ConverterConfig.from_dict({"and_list": {"range": "error"}})
    config = config.with_overrides(["style-mix-ontology:domain=ignore"])
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional


class OdityHandling(str, Enum):
    """How to behave in case an odity is detected in the source ontology."""
    IGNORE = "ignore"
    WARN = "warn"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value

    @property
    def ignore(self) -> bool:
        """True if this mode suppresses the check altogether."""
        return self is OdityHandling.IGNORE

    @classmethod
    def parse(cls, value: Any) -> "OdityHandling":
        """Parse a mode from a case-insensitive string (or pass a mode through)."""
        if isinstance(value, OdityHandling):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Invalid odity handling '{value}'. Expected one of: {choices}")


class PropertyRole(str, Enum):
    """The axis of a property that is being resolved."""
    RANGE = "range"
    DOMAIN = "domain"

    def __str__(self) -> str:
        return self.value


class OdityKind(str, Enum):
    """
    Kinds of odities the converter detects.

    - AND_LIST: ``rdfs:range``/``rdfs:domain`` lists more than one class,
      which means values have to be instances of *all* of them.
    - STYLE_MIX_PROPERTY: a single property uses more than one convention
      (e.g. ``rdfs:range`` and ``schema:rangeIncludes``) for the same role.
    - STYLE_MIX_ONTOLOGY: different properties use different conventions
      for the same role.
    """
    AND_LIST = "and-list"
    STYLE_MIX_PROPERTY = "style-mix-property"
    STYLE_MIX_ONTOLOGY = "style-mix-ontology"

    def __str__(self) -> str:
        return self.value

    @property
    def field_name(self) -> str:
        """Name of the matching ``ConverterConfig`` field."""
        return self.value.replace("-", "_")

    @classmethod
    def parse(cls, value: str) -> "OdityKind":
        """Parse a kind from either its CLI spelling or its field name."""
        normalized = str(value).strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown odity kind '{value}'. Expected one of: {choices}")


@dataclass(frozen=True)
class RoleModes:
    """Resolution modes of one odity kind, per property role."""
    range: OdityHandling = OdityHandling.WARN
    domain: OdityHandling = OdityHandling.WARN

    def __getitem__(self, role: PropertyRole) -> OdityHandling:
        return self.range if role is PropertyRole.RANGE else self.domain

    def with_mode(self, mode: OdityHandling, role: Optional[PropertyRole] = None) -> "RoleModes":
        """Return a copy with ``mode`` set for ``role`` (or both roles)."""
        if role is None:
            return RoleModes(range=mode, domain=mode)
        return replace(self, **{role.value: mode})

    @classmethod
    def from_value(cls, value: Any) -> "RoleModes":
        """
        Build from a config value.

        Accepts either a single mode string (applies to both roles) or a
        mapping with optional ``range`` and ``domain`` keys.
        """
        if isinstance(value, Mapping):
            unknown = set(value) - {r.value for r in PropertyRole}
            if unknown:
                raise ValueError(f"Unknown property role(s): {', '.join(sorted(unknown))}")
            return cls(
                range=OdityHandling.parse(value.get("range", OdityHandling.WARN)),
                domain=OdityHandling.parse(value.get("domain", OdityHandling.WARN)),
            )
        mode = OdityHandling.parse(value)
        return cls(range=mode, domain=mode)


@dataclass(frozen=True)
class ConverterConfig:
    """
    Odity resolution policy for one conversion run.

    Attributes:
        and_list: What to do if a property's ``rdfs:range``/``rdfs:domain``
            lists several classes. Possible objects then have to implement
            *all* of these classes, which is often not what was intended.
        style_mix_property: What to do if a single property uses both
            ``rdfs:range`` and ``*:rangeIncludes`` (or the domain
            counterparts), which is somewhat ill-defined.
        style_mix_ontology: What to do if some properties use ``rdfs:range``
            and others ``*:rangeIncludes`` (or the domain counterparts),
            which is technically fine but might be confusing.
    """
    and_list: RoleModes = field(default_factory=RoleModes)
    style_mix_property: RoleModes = field(default_factory=RoleModes)
    style_mix_ontology: RoleModes = field(default_factory=RoleModes)

    def mode_for(self, kind: OdityKind, role: PropertyRole) -> OdityHandling:
        """Look up the resolution mode of ``kind`` on the ``role`` axis."""
        modes: RoleModes = getattr(self, kind.field_name)
        return modes[role]

    def with_mode(
        self,
        kind: OdityKind,
        mode: OdityHandling,
        role: Optional[PropertyRole] = None,
    ) -> "ConverterConfig":
        """Return a copy with the mode of ``kind`` changed."""
        modes: RoleModes = getattr(self, kind.field_name)
        return replace(self, **{kind.field_name: modes.with_mode(mode, role)})

    def with_overrides(self, overrides: Iterable[str]) -> "ConverterConfig":
        """
        Apply CLI style overrides of the form ``KIND[:ROLE]=MODE``.

        Args:
            overrides: e.g. ``["and-list=error", "style-mix-ontology:domain=ignore"]``

        Returns:
            A new config with all overrides applied in order.

        Raises:
            ValueError: If an override is malformed.
        """
        config = self
        for override in overrides:
            if "=" not in override:
                raise ValueError(f"Invalid odity override '{override}'. Expected KIND[:ROLE]=MODE")
            target, mode_str = override.split("=", 1)
            kind_str, _, role_str = target.partition(":")
            role = None
            if role_str:
                try:
                    role = PropertyRole(role_str.strip().lower())
                except ValueError:
                    raise ValueError(f"Unknown property role '{role_str}' in override '{override}'")
            config = config.with_mode(OdityKind.parse(kind_str), OdityHandling.parse(mode_str), role)
        return config

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ConverterConfig":
        """
        Build a config from the ``odity_handling`` section of a config file.

        Example:
            {"and_list": "error", "style_mix_ontology": {"domain": "ignore"}}

        Raises:
            ValueError: On unknown odity kinds, roles or modes.
        """
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(f"odity_handling must be a JSON object, got {type(data).__name__}")
        kwargs: Dict[str, RoleModes] = {}
        for key, value in data.items():
            kind = OdityKind.parse(key)
            kwargs[kind.field_name] = RoleModes.from_value(value)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Serialize to the same structure ``from_dict`` accepts."""
        return {
            kind.field_name: {role.value: self.mode_for(kind, role).value for role in PropertyRole}
            for kind in OdityKind
        }
