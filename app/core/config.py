from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from searchvue.domain.entities.template import Template


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # App
    app_name: str = "SearchVue"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # Outbound HTTP (shared multi-request client)
    http_timeout_seconds: float = 10.0
    http_user_agent: str = "searchvue/0.1 (media preview service)"

    # Quick view media search; leaving any of these unset disables the feature
    quickview_media_repository_api_base_uri: Optional[str] = None
    quickview_search_filter_for_qid: Optional[str] = None
    quickview_media_repository_search_uri: Optional[str] = None

    @field_validator("quickview_search_filter_for_qid", "quickview_media_repository_search_uri")
    @classmethod
    def _check_template(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            Template(v)
        return v

    @property
    def quickview_enabled(self) -> bool:
        return (
            self.quickview_media_repository_api_base_uri is not None
            and self.quickview_search_filter_for_qid is not None
            and self.quickview_media_repository_search_uri is not None
        )

settings = Settings()
