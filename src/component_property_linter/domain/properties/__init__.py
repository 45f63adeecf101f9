"""Property check catalogue."""

from typing import Iterable, Optional

from component_property_linter.domain.properties.accessibility import (
    FormInputLabelsProperty,
    InteractiveAriaLabelsProperty,
)
from component_property_linter.domain.properties.base import BaseProperty
from component_property_linter.domain.properties.code_style import (
    ConstVariableDeclarationProperty,
    ImportOrganizationProperty,
)
from component_property_linter.domain.properties.parseability import SourceParseabilityProperty
from component_property_linter.domain.properties.rendering import (
    NextImageUsageProperty,
    ServerComponentDefaultProperty,
)
from component_property_linter.domain.properties.structure import (
    ComponentSizeProperty,
    DirectoryOrganizationProperty,
    JsxReusabilityProperty,
)
from component_property_linter.domain.properties.styling import (
    DarkModeSupportProperty,
    TailwindStylingProperty,
)
from component_property_linter.domain.properties.type_safety import (
    NoImplicitAnyProperty,
    NoUnusedCodeProperty,
    PropsInterfaceProperty,
    StateTypeAnnotationProperty,
)

PROPERTY_CATALOGUE: tuple[type[BaseProperty], ...] = (
    SourceParseabilityProperty,
    ComponentSizeProperty,
    JsxReusabilityProperty,
    DirectoryOrganizationProperty,
    PropsInterfaceProperty,
    StateTypeAnnotationProperty,
    NoImplicitAnyProperty,
    ServerComponentDefaultProperty,
    InteractiveAriaLabelsProperty,
    FormInputLabelsProperty,
    NextImageUsageProperty,
    TailwindStylingProperty,
    DarkModeSupportProperty,
    ConstVariableDeclarationProperty,
    ImportOrganizationProperty,
    NoUnusedCodeProperty,
)


class PropertyRegistry:
    """Lookup over the property catalogue by code or symbol."""

    def __init__(self, properties: Optional[Iterable[BaseProperty]] = None) -> None:
        self._properties: list[BaseProperty] = (
            list(properties) if properties is not None else [cls() for cls in PROPERTY_CATALOGUE]
        )

    @property
    def properties(self) -> list[BaseProperty]:
        """All registered properties in catalogue order."""
        return list(self._properties)

    def get(self, key: str) -> BaseProperty:
        """Property by code (``P025``) or symbol (``dark-mode-support``)."""
        normalized = key.strip()
        for prop in self._properties:
            if normalized.upper() == prop.code or normalized.lower() == prop.symbol:
                return prop
        raise KeyError(f"Unknown property '{key}'")

    def select(self, keys: Optional[Iterable[str]] = None) -> list[BaseProperty]:
        """Properties named by keys (catalogue order), or all of them."""
        if not keys:
            return self.properties
        wanted = {self.get(key).code for key in keys}
        return [prop for prop in self._properties if prop.code in wanted]


__all__ = [
    "PROPERTY_CATALOGUE",
    "BaseProperty",
    "PropertyRegistry",
    "ComponentSizeProperty",
    "ConstVariableDeclarationProperty",
    "DarkModeSupportProperty",
    "DirectoryOrganizationProperty",
    "FormInputLabelsProperty",
    "ImportOrganizationProperty",
    "InteractiveAriaLabelsProperty",
    "JsxReusabilityProperty",
    "NextImageUsageProperty",
    "NoImplicitAnyProperty",
    "NoUnusedCodeProperty",
    "PropsInterfaceProperty",
    "ServerComponentDefaultProperty",
    "SourceParseabilityProperty",
    "StateTypeAnnotationProperty",
    "TailwindStylingProperty",
]
