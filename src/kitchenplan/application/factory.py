"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from kitchenplan.application.config import (
    SceneConfiguration,
    config_to_fallback_policy,
    config_to_placement_settings,
    config_to_plinth_params,
    config_to_scene,
    config_to_worktop_params,
    load_config,
)

if TYPE_CHECKING:
    from kitchenplan.application.session import SceneSession
    from kitchenplan.contracts import SnapFeedbackSink
    from kitchenplan.domain.entities import Scene
    from kitchenplan.domain.services import (
        PlacementService,
        ProceduralSurfaceGenerator,
        VerticalPositionResolver,
    )
    from kitchenplan.infrastructure.exporters import ExportManager


@dataclass
class ServiceFactory:
    """Builds the scene and its services from one scene configuration.

    Services are created lazily and cached, so every getter returns the
    same instance and all of them share the scene's component catalog.

    Example:
        ```python
        factory = ServiceFactory.from_config(Path("kitchen.json"))
        session = factory.create_session()
        session.regenerate_surfaces()
        ```
    """

    config: SceneConfiguration
    feedback_sink: SnapFeedbackSink | None = None

    # Cached instances
    _scene: Scene | None = field(default=None, init=False, repr=False)
    _placement_service: PlacementService | None = field(
        default=None, init=False, repr=False
    )
    _vertical_resolver: VerticalPositionResolver | None = field(
        default=None, init=False, repr=False
    )
    _surface_generator: ProceduralSurfaceGenerator | None = field(
        default=None, init=False, repr=False
    )

    @classmethod
    def from_config(cls, path: Path) -> ServiceFactory:
        """Load a scene file and build a factory for it.

        Raises:
            ConfigError: If the file cannot be loaded or validated.
        """
        return cls(config=load_config(path))

    def get_scene(self) -> Scene:
        """Get or create the scene, with elevations resolved from legs."""
        if self._scene is None:
            self._scene = config_to_scene(self.config)
            resolver = self.get_vertical_resolver()
            for obj in self._scene.objects:
                resolver.apply(obj)
        return self._scene

    def get_placement_service(self) -> PlacementService:
        """Get or create the placement service."""
        if self._placement_service is None:
            from kitchenplan.domain.services import PlacementService

            self._placement_service = PlacementService(
                self.get_scene().catalog,
                settings=config_to_placement_settings(self.config),
                worktop=config_to_worktop_params(self.config),
                policy=config_to_fallback_policy(self.config),
                feedback_sink=self.feedback_sink,
            )
        return self._placement_service

    def get_vertical_resolver(self) -> VerticalPositionResolver:
        """Get or create the leg-driven elevation resolver."""
        if self._vertical_resolver is None:
            from kitchenplan.application.config import config_to_catalog
            from kitchenplan.domain.services import VerticalPositionResolver

            catalog = self._scene.catalog if self._scene else config_to_catalog(self.config)
            self._vertical_resolver = VerticalPositionResolver(
                catalog,
                plinth_height=self.config.plinth.height,
                global_leg_style=self.config.legs.global_style,
            )
        return self._vertical_resolver

    def get_surface_generator(self) -> ProceduralSurfaceGenerator:
        """Get or create the worktop and plinth generator."""
        if self._surface_generator is None:
            from kitchenplan.domain.services import ProceduralSurfaceGenerator

            self._surface_generator = ProceduralSurfaceGenerator(
                self.get_scene().catalog, legs=self.get_vertical_resolver()
            )
        return self._surface_generator

    def create_session(self) -> SceneSession:
        """Create an editing session wired to the cached services."""
        from kitchenplan.application.session import SceneSession

        return SceneSession(
            self.get_scene(),
            placement=self.get_placement_service(),
            elevation=self.get_vertical_resolver(),
            surfaces=self.get_surface_generator(),
            worktop_params=config_to_worktop_params(self.config),
            plinth_params=config_to_plinth_params(self.config),
        )

    def create_export_manager(self, output_dir: Path | None = None) -> ExportManager:
        """Create an export manager for the given (or configured) directory."""
        from kitchenplan.infrastructure.exporters import ExportManager

        if output_dir is None:
            output_dir = Path(self.config.output.output_dir or ".")
        return ExportManager(output_dir)
