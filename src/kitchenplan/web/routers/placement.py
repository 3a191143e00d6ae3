"""Placement resolution endpoint."""

from fastapi import APIRouter

from kitchenplan.application import PlacementOutput
from kitchenplan.domain.value_objects import Vector3
from kitchenplan.web.dependencies import FactoryBuilderDep
from kitchenplan.web.schemas.requests import PlacementRequest
from kitchenplan.web.schemas.responses import PlacementResponseSchema

router = APIRouter(prefix="/placement", tags=["placement"])


@router.post("", response_model=PlacementResponseSchema)
def resolve_placement(
    request: PlacementRequest, build: FactoryBuilderDep
) -> PlacementResponseSchema:
    """Resolve one drag of an object inside the given scene.

    The scene is rebuilt from the request for every call, so the endpoint
    is stateless: the returned transform is not stored anywhere.

    Raises:
        ConfigError: If the scene configuration is invalid (422).
        UnknownObjectError: If ``object_id`` is not in the scene (404).
    """
    session = build(request.config).create_session()
    obj = session.begin_drag(request.object_id)
    point = request.point
    proposed = Vector3(point.x, obj.position.y if point.y is None else point.y, point.z)
    result = session.drag_to(proposed)
    session.end_drag()

    output = PlacementOutput.from_result(request.object_id, result, obj.rotation.yaw)
    return PlacementResponseSchema.model_validate(output.to_dict())
