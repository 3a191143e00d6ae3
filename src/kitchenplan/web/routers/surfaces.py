"""Worktop and plinth generation endpoint."""

from fastapi import APIRouter

from kitchenplan.domain.value_objects import SurfaceKind
from kitchenplan.infrastructure.exporters import JsonSurfaceExporter
from kitchenplan.web.dependencies import FactoryBuilderDep
from kitchenplan.web.schemas.requests import SurfacesRequest
from kitchenplan.web.schemas.responses import SurfacesResponseSchema

router = APIRouter(prefix="/surfaces", tags=["surfaces"])


@router.post("", response_model=SurfacesResponseSchema)
def generate_surfaces(
    request: SurfacesRequest, build: FactoryBuilderDep
) -> SurfacesResponseSchema:
    """Generate the requested surfaces for the given scene.

    Kinds with nothing to build (no eligible cabinets) are left out of the
    response.

    Raises:
        ConfigError: If the scene configuration is invalid (422).
    """
    session = build(request.config).create_session()
    params = {
        SurfaceKind.WORKTOP: session.worktop_params,
        SurfaceKind.PLINTH: session.plinth_params,
    }
    meshes = []
    for kind in dict.fromkeys(request.kinds):
        mesh = session.surfaces.regenerate(kind, session.scene.objects, params[kind])
        if mesh is not None:
            meshes.append(mesh)

    exporter = JsonSurfaceExporter(include_mesh=request.include_mesh)
    return SurfacesResponseSchema.model_validate(exporter.to_dict(meshes))
