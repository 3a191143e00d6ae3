"""FastAPI dependency injection for kitchenplan services."""

from collections.abc import Callable
from typing import Annotated, Any

from fastapi import Depends

from kitchenplan.application.config import load_config_from_dict
from kitchenplan.application.factory import ServiceFactory

FactoryBuilder = Callable[[dict[str, Any]], ServiceFactory]


def build_factory(config: dict[str, Any]) -> ServiceFactory:
    """Validate a scene configuration and build a factory for it.

    Raises:
        ConfigError: If the configuration fails validation.
    """
    return ServiceFactory(config=load_config_from_dict(config))


def get_factory_builder() -> FactoryBuilder:
    """Dependency returning the factory builder (overridable in tests)."""
    return build_factory


# Type aliases for cleaner endpoint signatures
FactoryBuilderDep = Annotated[FactoryBuilder, Depends(get_factory_builder)]
