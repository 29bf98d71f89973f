"""
API Router for instance configuration.

Exposes endpoints for:
- The client-safe configuration projection (GET /config/frontend)
- The instance policy statements (GET /instance/rules)

Both are derived from the configuration loaded once at startup and held on
`app.state.config`, so a request never touches the configuration file.
"""

from fastapi import APIRouter, Depends, Request  # type: ignore[import-not-found]

from ..models import FrontendConfig, GathioConfig, InstanceRulesResponse
from ..services.config_service import build_frontend_config, build_instance_rules

router = APIRouter(tags=["instance"])


def get_app_config(request: Request) -> GathioConfig:
    return request.app.state.config


@router.get("/config/frontend", response_model=FrontendConfig)
def get_frontend_config(config: GathioConfig = Depends(get_app_config)):
    return build_frontend_config(config)


@router.get("/instance/rules", response_model=InstanceRulesResponse)
def get_instance_rules(config: GathioConfig = Depends(get_app_config)):
    return InstanceRulesResponse(rules=build_instance_rules(config))
