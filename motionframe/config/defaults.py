"""Default resolution settings."""

from pydantic import BaseModel, ConfigDict, Field


class ResolutionSettings(BaseModel):
    """Tolerances and reporting options of a resolution pass."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    animation_domain_atol: float = Field(
        default=1e-4,
        ge=0.0,
        description="How far an animation's last keyframe may be from t=1.0 before warning.",
    )
    warn_out_of_range: bool = Field(
        default=True,
        description="Log elements whose frames leave their parent's frames.",
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR)$",
        description="Level of the motionframe console logger.",
    )


def get_default_settings() -> ResolutionSettings:
    return ResolutionSettings()
