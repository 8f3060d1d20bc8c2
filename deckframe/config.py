from pydantic_settings import BaseSettings

from deckframe.models import ComplianceLimits


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Compliance warning thresholds
    SPAN_MARGIN_RATIO: float = 0.05
    MAX_JOIST_SPACING_IN: int = 24
    MULTI_PLY_TRIBUTARY_FT: float = 10.0
    CANTILEVER_SPAN_RATIO: float = 0.25
    MAX_CANTILEVER_FT: float = 2.0
    SURFACE_FOOTING_MAX_HEIGHT_FT: float = 2.5
    DISABLED_RULES: list[str] = []

    class Config:
        env_file = ".env"
        env_prefix = "DECKFRAME_"

    def compliance_limits(self) -> ComplianceLimits:
        return ComplianceLimits(
            span_margin_ratio=self.SPAN_MARGIN_RATIO,
            max_joist_spacing_in=self.MAX_JOIST_SPACING_IN,
            multi_ply_tributary_ft=self.MULTI_PLY_TRIBUTARY_FT,
            cantilever_span_ratio=self.CANTILEVER_SPAN_RATIO,
            max_cantilever_ft=self.MAX_CANTILEVER_FT,
            surface_footing_max_height_ft=self.SURFACE_FOOTING_MAX_HEIGHT_FT,
            disabled_rules=self.DISABLED_RULES,
        )


settings = Settings()
