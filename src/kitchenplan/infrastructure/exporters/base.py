"""Exporter protocol, format registry and multi-format export manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kitchenplan.domain.value_objects import GeneratedSurfaceMesh


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Writes a set of generated surfaces (worktop, plinth) to one file.

    Attributes:
        format_name: Registry key, also used in output file names.
        file_extension: Extension without the leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, surfaces: Sequence[GeneratedSurfaceMesh], path: Path) -> None:
        ...

    def export_string(self, surfaces: Sequence[GeneratedSurfaceMesh]) -> str:
        """Text rendition of the export. Binary formats leave this out."""
        raise NotImplementedError(f"{self.format_name} has no text form")


class ExporterRegistry:
    """Format name to exporter class lookup.

    Exporter modules register on import:

        @ExporterRegistry.register("stl")
        class StlSurfaceExporter: ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            previous = cls._exporters.get(format_name)
            if previous is not None and previous is not exporter_class:
                logger.warning(
                    f"{exporter_class.__name__} replaces {previous.__name__} "
                    f"for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Exporter class for ``format_name``.

        Raises:
            KeyError: Unknown format. The message lists the known ones.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            known = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"No exporter for surface format '{format_name}'. "
                f"Available formats: {known}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)


class ExportManager:
    """Writes generated surfaces to ``output_dir`` in several formats.

    Files are named ``{project_name}_{format}.{extension}``.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def path_for(self, exporter: type[Exporter], project_name: str) -> Path:
        return (
            self.output_dir
            / f"{project_name}_{exporter.format_name}.{exporter.file_extension}"
        )

    def export_all(
        self,
        formats: list[str],
        surfaces: Sequence[GeneratedSurfaceMesh],
        project_name: str = "kitchen",
    ) -> dict[str, Path]:
        """Export the surfaces once per requested format.

        Every format is looked up before the directory is created or any
        file is written.

        Returns:
            Output path per format name.

        Raises:
            KeyError: A format is not registered.
            OSError: The directory or a file cannot be written.
        """
        exporters = {name: ExporterRegistry.get(name) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        kinds = ", ".join(s.kind.value for s in surfaces) or "no surfaces"
        paths: dict[str, Path] = {}
        for name, exporter_class in exporters.items():
            path = self.path_for(exporter_class, project_name)
            exporter_class().export(surfaces, path)
            logger.info(f"Exported {kinds} as {name}: {path}")
            paths[name] = path
        return paths
