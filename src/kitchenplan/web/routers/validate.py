"""Scene validation endpoint."""

from fastapi import APIRouter

from kitchenplan.application.config import load_config_from_dict, validate_config
from kitchenplan.web.schemas.requests import ConfigValidateRequest
from kitchenplan.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
def validate_scene(request: ConfigValidateRequest) -> ValidationResultSchema:
    """Validate a scene configuration without placing anything.

    Schema errors are reported through the ConfigError handler (422);
    scene problems come back in the body.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
