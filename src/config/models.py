from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_API_URL = "http://localhost:3000"


class ApiSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_url: str = DEFAULT_API_URL
    timeout_seconds: float | None = Field(default=None, gt=0)

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value


class FeedbackSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    success_display_seconds: float = Field(default=3.0, gt=0)
    notification_ms: int = Field(default=3000, gt=0)


class UiSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = "TinyLink"
    subtitle: str = "Shorten your URLs and track clicks"


class ConsoleConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    api: ApiSettings = Field(default_factory=ApiSettings)
    feedback: FeedbackSettings = Field(default_factory=FeedbackSettings)
    ui: UiSettings = Field(default_factory=UiSettings)
