from pydantic import BaseModel, ConfigDict, Field, ValidationError

from jpegresize.core.errors import ConfigError

MIN_QUALITY = 10
MAX_QUALITY = 100


class ExportConfig(BaseModel):
    """Resize/encode settings shared read-only by every worker of a run"""
    model_config = ConfigDict(frozen=True)

    max_width: int = Field(default=1920, gt=0)
    # Accepted but never used to constrain height; width alone drives the scale
    max_height: int = Field(default=1920, gt=0)
    quality: int = Field(default=89, ge=MIN_QUALITY, le=MAX_QUALITY)

    @classmethod
    def create(cls, **values) -> "ExportConfig":
        """Build a config, turning validation failures into ConfigError."""
        try:
            return cls(**values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigError(f"Invalid export settings ({problems})") from e
